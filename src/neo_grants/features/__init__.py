"""Feature packages for neo-grants."""
