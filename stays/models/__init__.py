from stays.models.property import Property, PropertyImage, PropertyCategory

__all__ = [
    "Property",
    "PropertyImage",
    "PropertyCategory",
]
