from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.registry import bridge_tool
from services.tools.utils import clamp, coerce_int, error_result, success_result, to_json
from transport.rc_client import SEARCH_ENDPOINT, rc_fetch

DEFAULT_LIMIT = 25
MAX_LIMIT = 200


def build_search_body(query: str, class_name: str | None, path: str | None, limit: int) -> dict[str, Any]:
    body: dict[str, Any] = {"Query": query, "Limit": limit}
    filters: dict[str, list[str]] = {}
    if class_name:
        filters["ClassNames"] = [class_name]
    if path:
        filters["PackagePaths"] = [path]
    if filters:
        body["Filter"] = filters
    return body


def _asset_line(asset: Any) -> str:
    if isinstance(asset, str):
        return f"- `{asset}`"
    if isinstance(asset, dict):
        name = asset.get("AssetPath") or asset.get("ObjectPath") or asset.get("Name") or to_json(asset)
        line = f"- `{name}`"
        if asset.get("ClassName"):
            line += f" ({asset['ClassName']})"
        return line
    return f"- `{to_json(asset)}`"


@bridge_tool(
    name="ue5_search_assets",
    description="Search the UE5 asset registry by name, class, or path using the Remote Control API.",
    annotations=ToolAnnotations(
        title="Search UE5 Asset Registry",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def search_assets(
    ctx: Context,
    query: Annotated[str, "Search query string"],
    class_name: Annotated[str, "Filter by asset class (e.g., StaticMesh, Material, Blueprint)"] | None = None,
    path: Annotated[str, "Filter by asset path prefix (e.g., /Game/Meshes)"] | None = None,
    limit: Annotated[int | str, "Max results (1-200, default 25)"] | None = None,
) -> dict[str, Any]:
    limit = clamp(coerce_int(limit, default=DEFAULT_LIMIT), 1, MAX_LIMIT)

    try:
        response = await rc_fetch(SEARCH_ENDPOINT, "PUT", build_search_body(query, class_name, path, limit))
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"Asset search failed (HTTP {response.status}): {to_json(response.data)}")

    assets = response.data.get("Assets", []) if isinstance(response.data, dict) else response.data
    if not isinstance(assets, list) or not assets:
        return success_result(f'No assets found matching "{query}".', data={"assets": []})

    shown = assets[:limit]
    output = f'## Asset Search: "{query}"\n\n'
    output += f"Found {len(assets)} assets\n\n"
    output += "\n".join(_asset_line(asset) for asset in shown)
    return success_result(output, data={"assets": shown, "total": len(assets)})
