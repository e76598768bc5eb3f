"""
API route modules, one per resource:

- factories, users, auth (login, logout, current user)
- dashboard metrics
- production, inventory, workforce, alerts

Routers are included from factory_dashboard.api.main (under the /api prefix).
"""
