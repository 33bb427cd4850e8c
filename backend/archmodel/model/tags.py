# Tags consumed by the serialization and view layers.
ELEMENT = "Element"
PERSON = "Person"
SOFTWARE_SYSTEM = "Software System"
CONTAINER = "Container"
COMPONENT = "Component"

RELATIONSHIP = "Relationship"
SYNCHRONOUS = "Synchronous"
ASYNCHRONOUS = "Asynchronous"
