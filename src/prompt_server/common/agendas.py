"""get_top_udm_agendas: instructions for ranking UDM agendas in Jira.

The tool does not query Jira. It hands the caller the steps to follow with
their own Atlassian tooling. The ranking outline below only names what the caller
should weigh; no scoring happens here.
"""

import json
from typing import Any

from prompt_server.common.logging import get_logger

logger = get_logger(__name__)

UDM_JQL = "project = UDM AND statusCategory != Done ORDER BY priority DESC, updated DESC"

AGENDA_INSTRUCTIONS = f"""\
get_top_udm_agendas is not implemented. No Jira query was run.

To find the top UDM agendas, follow these steps with an Atlassian/Jira tool:
1. Search Jira issues with this JQL:
   {UDM_JQL}
2. For every issue collect: key, summary, priority, status, assignee,
   due date, last updated date and the number of linked issues.
3. Rank the issues by importance, considering priority, due date,
   recent activity and linked issues.
4. Keep the top 5.
5. Report each agenda as: key, summary and a one-line reason.
If the search returns nothing, report that there are no open UDM agendas.
"""

RANKING_OUTLINE: dict[str, Any] = {
    "name": "udm_agenda_ranking",
    "implemented": False,
    "source": {"system": "jira", "jql": UDM_JQL},
    "factors": ["priority", "due_date", "recent_activity", "linked_issues"],
    "output": {"top_n": 5, "fields": ["key", "summary", "reason"]},
}


def get_top_udm_agendas_tool() -> tuple[str, str]:
    """Get get_top_udm_agendas tool definition.

    Returns:
        Tuple of (name, description)
    """
    name = "get_top_udm_agendas"
    description = (
        "Explains how to find the top UDM agendas in Jira. "
        "Not implemented: returns instructions instead of results."
    )
    return name, description


def get_top_udm_agendas() -> str:
    """Return the fixed instruction block."""
    return AGENDA_INSTRUCTIONS


def get_top_udm_agendas_report() -> dict:
    """Return the instructions and the scoring procedure as one object.

    Returns:
        ``{"success": True, "status": "not_implemented", ...}`` or, if the
        report cannot be built, ``{"success": False, "error": ...}``
    """
    try:
        # Round-trip through JSON so the caller only ever sees plain JSON values
        procedure = json.loads(json.dumps(RANKING_OUTLINE))
        return {
            "success": True,
            "status": "not_implemented",
            "instructions": AGENDA_INSTRUCTIONS,
            "procedure": procedure,
        }
    except Exception as e:
        logger.error(f"Failed to build UDM agenda report: {e}")
        return {
            "error": str(e),
            "success": False
        }
