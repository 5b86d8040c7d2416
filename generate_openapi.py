"""Write the OpenAPI schema of the HealthLog API to a JSON file."""

from pathlib import Path
import json
from typing import Optional

from healthlog.main import app


def generate_openapi(output_path: Optional[Path] = None) -> Path:
    """Write the current OpenAPI schema, by default to ``openapi.json`` here."""
    schema = app.openapi()

    for path_item in schema.get("paths", {}).values():
        for method, operation in path_item.items():
            if isinstance(operation, dict):
                operation["x-idempotent"] = method in {"get", "head", "put", "delete"}
    output_path = output_path or Path(__file__).resolve().parent / "openapi.json"
    output_path.write_text(json.dumps(schema, indent=2))
    return output_path


if __name__ == "__main__":
    generate_openapi()
