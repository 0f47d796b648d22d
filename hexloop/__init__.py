"""hexloop — drop pipe tiles on a hex grid and close loops."""
