"""
Dinky Response Sentinel - MCP Server for masking Dinky API responses

A local MCP (Model Context Protocol) server that lets AI agents hand over raw
responses from the Dinky admin API and get them back with credentials masked,
using exactly the rules the API applies to its own outbound results.

Tools:
    - sanitize_api_response: Mask a raw response of a known endpoint
    - mask_sql_text: Mask 'password'='...' assignments in free SQL/config text
    - list_sanitized_endpoints: Show which endpoints are understood

Safety Constraints:
    - Masking is irreversible; the original values are never returned
    - Unknown endpoints are rejected rather than passed through unmasked
"""

from typing import Any, Callable

from mcp.server.fastmcp import FastMCP

from sanitizer import get_default_sanitizer, sanitize_response
from sanitizer.models import (
    DataBase,
    ExplainResult,
    History,
    JobInfoDetail,
    ProTableResult,
    Result,
    SqlExplainResult,
)

# Initialize MCP server
mcp = FastMCP(
    "dinky-response-sentinel",
    instructions="MCP Server for masking credentials in Dinky admin API responses"
)

# Reads .env and the environment once; a malformed pattern stops startup here
response_sanitizer = get_default_sanitizer()


def _decode_result(decode_data: Callable[[Any], Any]) -> Callable[[dict], Result]:
    def decode(payload: dict) -> Result:
        envelope = Result.from_dict(payload)
        if envelope.data is not None:
            envelope.data = decode_data(envelope.data)
        return envelope
    return decode


def _decode_table(record_type: type) -> Callable[[dict], ProTableResult]:
    def decode(payload: dict) -> ProTableResult:
        envelope = ProTableResult.from_dict(payload)
        if envelope.data is not None:
            envelope.data = [record_type.from_dict(row) for row in envelope.data]
        return envelope
    return decode


# Endpoint path -> decoder for its raw JSON response
ENDPOINT_DECODERS: dict[str, Callable[[dict], Any]] = {
    "/openapi/explainSql": _decode_result(ExplainResult.from_dict),
    "/api/studio/explainSql": _decode_result(lambda rows: [SqlExplainResult.from_dict(r) for r in rows]),
    "/api/history": _decode_table(History),
    "/api/history/getOneById": _decode_result(History.from_dict),
    "/api/jobInstance/getJobInfoDetail": _decode_result(JobInfoDetail.from_dict),
    "/api/database/listDataBases": _decode_table(DataBase),
    "/api/database/getOneById": _decode_result(DataBase.from_dict),
}


@sanitize_response(sanitizer=response_sanitizer)
def _sanitized(envelope: Any) -> Any:
    return envelope


@mcp.tool()
def sanitize_api_response(endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
    """
    Mask credentials in a raw Dinky admin API response.

    Args:
        endpoint: The API path the response came from.
                  Example: "/api/database/getOneById" or "/api/history"
        payload: The JSON response body exactly as returned by the API.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - endpoint: The endpoint the payload was decoded for
        - kind: The payload kind that was recognised (null if nothing to mask)
        - response: The response body with sensitive fields masked

    Example usage:
        sanitize_api_response("/api/database/getOneById",
                              {"code": 0, "datas": {"password": "abcdefgh12"}})

    Notes:
        - SQL, history statements and Flink configuration are fully masked
        - Data source passwords keep their first two characters and last third
    """
    decoder = ENDPOINT_DECODERS.get(endpoint)
    if decoder is None:
        return {
            "status": "error",
            "endpoint": endpoint,
            "message": f"Unknown endpoint '{endpoint}'. Use list_sanitized_endpoints to see supported endpoints."
        }

    try:
        envelope = decoder(payload)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        return {
            "status": "error",
            "endpoint": endpoint,
            "message": f"Malformed payload for {endpoint}: {str(e)}"
        }

    try:
        kind = response_sanitizer.classify(envelope)
        envelope = _sanitized(envelope)

        return {
            "status": "success",
            "endpoint": endpoint,
            "kind": kind.value if kind else None,
            "response": envelope.to_dict()
        }

    except Exception as e:
        return {
            "status": "error",
            "endpoint": endpoint,
            "message": f"Unexpected error: {str(e)}"
        }


@mcp.tool()
def mask_sql_text(text: str) -> dict[str, Any]:
    """
    Mask 'password'='...' assignments in arbitrary SQL or Flink configuration text.

    Args:
        text: The SQL script or configuration text to mask.

    Returns:
        A dictionary containing:
        - status: "success"
        - masked: The text with every credential assignment replaced
        - was_masked: True if anything was replaced

    Example usage:
        mask_sql_text("CREATE TABLE t WITH ('password'='s3cret')")
    """
    masked, was_masked = response_sanitizer.mask_text(text)
    return {
        "status": "success",
        "masked": masked,
        "was_masked": was_masked
    }


@mcp.tool()
def list_sanitized_endpoints() -> dict[str, Any]:
    """
    List the Dinky API endpoints whose responses can be sanitized.

    Returns:
        A dictionary containing:
        - status: "success"
        - endpoints: Supported endpoint paths
        - count: Number of supported endpoints
    """
    endpoints = sorted(ENDPOINT_DECODERS)
    return {
        "status": "success",
        "endpoints": endpoints,
        "count": len(endpoints)
    }


if __name__ == "__main__":
    # Run the MCP server using stdio transport
    mcp.run()
