"""
Domain services: validation of factory references, derivation rules on every
write path, dashboard metrics, and update notifications.
"""
