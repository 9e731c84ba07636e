"""Custom SQLAlchemy column types for contraction_clock."""

import json

from typing import Any

from sqlalchemy import Text, TypeDecorator


class ValidatedJSON(TypeDecorator[Any]):
    """
    A JSON column type that validates JSON before storing.

    This type ensures that:
    1. Values can be serialized to JSON
    2. Stored values are valid JSON strings
    3. Retrieved values are automatically deserialized to Python objects

    Example:
        class MyModel(Base):
            data = mapped_column(ValidatedJSON)

        obj.data = [{"id": 1}]  # Validated and serialized
        print(obj.data)  # Deserialized to list
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        """
        Convert Python object to JSON string before storing.

        Raises:
            ValueError: If value cannot be serialized to JSON
        """
        if value is None:
            return None

        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Cannot serialize value to JSON: {e}. Value type: {type(value).__name__}"
            ) from e

    def process_result_value(self, value: str | None, dialect: Any) -> Any:
        """
        Convert JSON string to Python object after retrieval.

        Raises:
            ValueError: If stored value is not valid JSON
        """
        if value is None:
            return None

        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Stored value is not valid JSON: {e}. Value: {value[:100]}..."
            ) from e
