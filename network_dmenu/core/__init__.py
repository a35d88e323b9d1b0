"""Core of network-dmenu: tool parsers, typed actions, registry and dispatcher."""
