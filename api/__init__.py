"""REST API for password strength feedback."""
