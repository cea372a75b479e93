"""Core puro: dominio, contratos, configuración y servicios."""
