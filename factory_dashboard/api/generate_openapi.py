import json
import os
from typing import Any, Dict

from fastapi import FastAPI

from factory_dashboard.services.production import PRODUCTION_UPDATED
from factory_dashboard.services.inventory import INVENTORY_UPDATED
from factory_dashboard.services.workforce import WORKFORCE_UPDATED
from factory_dashboard.services.alerts import ALERT_CREATED, ALERT_UPDATED


# PUBLIC_INTERFACE
def build_openapi(app: FastAPI) -> Dict[str, Any]:
    """Return the app's OpenAPI schema with the WebSocket endpoint documented as an extension."""
    openapi_schema = app.openapi()

    # Inject non-standard extension with WebSocket endpoint docs
    openapi_schema["x-websocket-endpoints"] = [
        {
            "path": "/ws/updates/{factoryId}",
            "summary": "Factory update events (pushed only when REALTIME_ENABLED is true)",
            "messages": {
                "client_to_server": ["ping"],
                "server_to_client": [
                    PRODUCTION_UPDATED,
                    INVENTORY_UPDATED,
                    WORKFORCE_UPDATED,
                    ALERT_CREATED,
                    ALERT_UPDATED,
                ],
            },
        },
    ]
    return openapi_schema


if __name__ == "__main__":
    from factory_dashboard.api.main import app

    # Write to file
    output_dir = "interfaces"
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, "openapi.json")

    with open(output_path, "w") as f:
        json.dump(build_openapi(app), f, indent=2)
