"""Vercel serverless function for counting elections."""

import json
import sys
from pathlib import Path
from urllib.parse import urlparse

import httpx

# Add the project root to the path so we can import election modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from election.analyze import AnalysisError, analyze_election  # noqa: E402
from election.errors import ElectionError  # noqa: E402
from election.loader import parse_payload  # noqa: E402

FETCH_TIMEOUT = 30.0


def handler(request):
    """Handle incoming requests to count an election.

    Accepts:
    - POST with JSON body holding the election itself:
      {"candidates": [...], "ballots": [...], "methods": ["ranked_choice"]}
    - POST with JSON body pointing at one: {"url": "https://...", "methods": [...]}

    "methods" is optional; every election type is counted when it is absent.

    Returns JSON with one result per election type.
    """
    # Handle CORS preflight
    if request.method == "OPTIONS":
        return create_response(
            "",
            status=204,
            headers={
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Methods": "POST, OPTIONS",
                "Access-Control-Allow-Headers": "Content-Type",
            },
        )

    if request.method != "POST":
        return create_response(
            {"error": "Method not allowed. Use POST."},
            status=405,
        )

    try:
        content_type = request.headers.get("content-type", "")
        if "application/json" not in content_type:
            return create_response(
                {"error": f"Unsupported content type: {content_type}"},
                status=400,
            )

        data = json.loads(request.body.decode("utf-8"))
        if not isinstance(data, dict):
            return create_response(
                {"error": "Request body must be a JSON object"},
                status=400,
            )

        methods = data.get("methods")
        if methods is not None and not isinstance(methods, list):
            return create_response(
                {"error": "'methods' must be a list"},
                status=400,
            )

        url = data.get("url")
        if url is not None and not isinstance(url, str):
            return create_response(
                {"error": "'url' must be a string"},
                status=400,
            )

        if url:
            payload = parse_payload(fetch_url(url))
        elif "ballots" in data or "candidates" in data:
            payload = data
        else:
            return create_response(
                {"error": "Missing 'url' or election data in request body"},
                status=400,
            )

        result = analyze_election(payload, methods)

        return create_response(result.to_dict())

    except (AnalysisError, ElectionError) as e:
        return create_response(
            {"error": str(e)},
            status=400,
        )
    except json.JSONDecodeError as e:
        return create_response(
            {"error": f"Invalid JSON: {e}"},
            status=400,
        )
    except Exception as e:
        return create_response(
            {"error": f"Internal error: {e}"},
            status=500,
        )


def fetch_url(url: str) -> bytes:
    """Fetch an election payload from a URL."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise AnalysisError(f"Invalid URL scheme: {parsed.scheme}")

    try:
        with httpx.Client(follow_redirects=True, timeout=FETCH_TIMEOUT) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content
    except httpx.HTTPStatusError as e:
        raise AnalysisError(f"HTTP error fetching URL: {e.response.status_code}")
    except httpx.RequestError as e:
        raise AnalysisError(f"Error fetching URL: {e}")


def create_response(body, status: int = 200, headers: dict = None):
    """Create a response object for Vercel."""
    response_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }
    if headers:
        response_headers.update(headers)

    if isinstance(body, dict):
        body = json.dumps(body)

    return {
        "statusCode": status,
        "headers": response_headers,
        "body": body,
    }
