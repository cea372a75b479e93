"""Servicios puros del Core: composición de clases y paginación."""
