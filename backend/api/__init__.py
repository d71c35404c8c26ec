"""
HTTP routers for the /api/v1 surface.
"""
