"""Core dice model: dice, cups and throws."""
