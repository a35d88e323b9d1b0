"""Wi-Fi backends: NetworkManager (nmcli) and iwd (iwctl)."""
