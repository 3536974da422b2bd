"""
Guest list shipped with the application, used at startup and on reset
"""

from app.models import Guest

DEFAULT_GUESTS = [
    Guest(name="Carolina Barrios", table="1"),
    Guest(name="Luis Rodríguez", table="1"),
    Guest(name="Rafael Rodríguez", table="2"),
    Guest(name="María Fernanda", table="2"),
    Guest(name="Javier Ugarte", table="3"),
    Guest(name="Ana Lucía", table="3"),
    Guest(name="Marcelo Wong", table="4"),
    Guest(name="Sofía Pérez", table="4"),
    Guest(name="Rodrigo Silva", table="5"),
    Guest(name="Valeria Torres", table="5"),
    Guest(name="Cecilia González", table="6"),
    Guest(name="Tomás Herrera", table="6"),
]
