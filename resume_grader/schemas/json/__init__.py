from typing import Any, Dict

from .grade import SCHEMA as GRADE_SCHEMA

_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "grade": GRADE_SCHEMA,
}


class JSONSchemaFactory:
    def get(self, name: str) -> Dict[str, Any]:
        try:
            return _SCHEMAS[name]
        except KeyError:
            raise KeyError(f"Unknown JSON schema: {name}") from None


json_schema_factory = JSONSchemaFactory()

__all__ = ["json_schema_factory"]
