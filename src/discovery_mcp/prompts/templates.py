"""Prompt templates for discovery insights."""

from typing import Any

# Prompt definitions
PROMPTS = {
    "advisor_briefing": {
        "description": "Pre-meeting briefing for the advisor from a client's discovery record",
        "arguments": [{"name": "client_name", "required": True}],
    },
    "client_next_steps": {
        "description": "Plain-language next steps for the client",
        "arguments": [
            {"name": "client_name", "required": True},
            {"name": "max_actions", "required": False},
        ],
    },
}


def list_prompts() -> list[dict[str, Any]]:
    """List available prompts."""
    return [
        {
            "name": name,
            "description": info["description"],
            "arguments": info["arguments"],
        }
        for name, info in PROMPTS.items()
    ]


def get_prompt(name: str, arguments: dict[str, str]) -> dict[str, Any] | None:
    """
    Get a prompt by name with arguments filled in.

    Returns dict with 'messages' key for MCP GetPromptResult.
    """
    if name not in PROMPTS:
        return None

    if name == "advisor_briefing":
        client_name = arguments.get("client_name", "the client")
        return {
            "messages": [
                {
                    "role": "user",
                    "content": f"""Prepare a discovery briefing for {client_name}.

Execute these tools in order:
1. check_readiness(profile) with {client_name}'s intake record
2. get_discovery_insights(profile) if the record is ready
3. planning_catalog() for domain labels

If the record is not ready, list the suggestions from step 1 and stop.

Otherwise write the briefing with these sections:
1. **Planning Posture**: The strategy profile summary, then each dimension with its value and confidence
2. **Where To Focus**: The top 3 focus areas with their rationale and any risk factors
3. **Value Tensions**: Any conflictFlags in values_profile, framed as trade-offs between the client's values worth exploring in the meeting
4. **Recommended Actions**: Each top action with urgency and who should guide it
5. **Open Questions**: Dimensions reported with LOW confidence and what to ask to firm them up

Quote the rationale strings as given. Do not invent scores or thresholds.""",
                }
            ]
        }

    if name == "client_next_steps":
        client_name = arguments.get("client_name", "the client")
        max_actions = arguments.get("max_actions") or "5"
        return {
            "messages": [
                {
                    "role": "user",
                    "content": f"""Write next steps for {client_name} after their discovery session.

Use get_discovery_insights(profile) with {client_name}'s intake record.

If it returns insufficient_data, explain in two sentences which sections to finish, using the suggestions.

Otherwise write at most {max_actions} numbered steps taken from topActions, in order. For each step:
- One sentence on what to do
- One sentence linking it to the value or goal it supports
- Whether they can do it on their own or with their advisor

Plain language. No jargon, no product recommendations.""",
                }
            ]
        }

    return None
