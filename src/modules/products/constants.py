"""Fixed messages of the products API."""

PRODUCT_NOT_FOUND_MESSAGE = "Producto No Encontrado"
PRODUCT_DELETED_MESSAGE = "Producto Eliminado"

_PRICE_INVALID = "Precio no válido"
_PRICE_NOT_NUMERIC = "Valor no válido"
_NAME_EMPTY = "El nombre de Producto no puede ir vacio"
_AVAILABILITY_INVALID = "Valor para disponibilidad no válido"

# Violation messages per field, keyed by pydantic error type.
VIOLATION_MESSAGES = {
    "id": {
        "default": "ID no válido",
    },
    "name": {
        "missing": _NAME_EMPTY,
        "string_too_short": _NAME_EMPTY,
        "blank_name": _NAME_EMPTY,
        "string_too_long": "El nombre de Producto no puede superar los 100 caracteres",
        "default": "Nombre de Producto no válido",
    },
    "price": {
        "missing": "El precio de Producto no puede ir vacio",
        "float_parsing": _PRICE_NOT_NUMERIC,
        "float_type": _PRICE_NOT_NUMERIC,
        "finite_number": _PRICE_NOT_NUMERIC,
        "greater_than": _PRICE_INVALID,
        "default": _PRICE_NOT_NUMERIC,
    },
    "availability": {
        "default": _AVAILABILITY_INVALID,
    },
    "body": {
        "default": "Cuerpo de la petición no válido",
    },
}
