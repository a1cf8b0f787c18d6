from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from models import BatchOperation
from services.batch import run_batch
from services.registry import bridge_tool
from services.tools.utils import error_result, success_result


@bridge_tool(
    name="ue5_batch",
    description="Execute multiple Remote Control operations (1-50) in a single HTTP batch request. "
    "Each operation is either a function call ({type: 'call', object_path, function_name, parameters}) "
    "or a property set ({type: 'property', object_path, property_name, property_value}). "
    "Results are reported per operation in submission order.",
    annotations=ToolAnnotations(
        title="Batch UE5 Remote Control Operations",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def batch(
    ctx: Context,
    operations: Annotated[list[BatchOperation], "Array of 1-50 operations to execute"],
) -> dict[str, Any]:
    try:
        verdicts, failure = await run_batch(operations)
    except BridgeError as e:
        return error_result(str(e))
    except Exception as e:
        return error_result(f"Python error running batch: {e}")

    failed = sum(1 for v in verdicts if not v.ok)
    output = f"## Batch Results ({len(verdicts)} operations)\n\n"
    output += "\n".join(v.render() for v in verdicts)
    data = {
        "verdicts": [v.model_dump() for v in verdicts],
        "failed": failed,
    }

    if failure is not None:
        return error_result(f"{failure}\n\n{output}", data=data)

    await ctx.info(f"Batch completed: {len(verdicts) - failed}/{len(verdicts)} succeeded")
    return success_result(output, data=data)
