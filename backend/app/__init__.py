"""CyberGuard incident triage backend."""
