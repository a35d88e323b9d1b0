"""Command line front end for network-dmenu."""
