"""Adaptadores: Jinja2/markupsafe, Pydantic, exportadores."""
