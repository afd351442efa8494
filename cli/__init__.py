"""Developer CLI for the Dynamic Alarm System."""
