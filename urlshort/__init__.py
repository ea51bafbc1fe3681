"""URL Redirect Service.

Maps request paths to redirect destinations loaded from YAML, JSON or an
in-memory mapping, delegating everything else to a fallback ASGI app.
"""
