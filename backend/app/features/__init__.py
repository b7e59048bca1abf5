"""Feature modules for CyberGuard."""
