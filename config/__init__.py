"""
Configuracion: settings (pydantic-settings), constantes y logging.
"""
