"""Find git repositories below a directory and show their current branches."""
