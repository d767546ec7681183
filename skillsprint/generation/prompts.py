"""Roadmap prompt construction."""

# ============================================================================
# Prompts
# ============================================================================

ROADMAP_PERSONA = "You are an expert learning coach."

ROADMAP_SCHEMA = """{
  "title": string,
  "overview": string,
  "totalDays": number,
  "phases": [
    {
      "name": string,
      "durationDays": number,
      "goals": [string],
      "topics": [
        {
          "name": string,
          "resources": [{"name": string, "url": string}]
        }
      ],
      "milestones": [string]
    }
  ],
  "resources": {
    "websites": [{"name": string, "url": string}],
    "courses": [{"name": string, "url": string}],
    "videos": [{"name": string, "url": string}],
    "books": [{"name": string, "url": string}],
    "githubProjects": [{"name": string, "url": string}]
  },
  "projects": [string],
  "successMetrics": [string]
}"""


def build_roadmap_prompt(skill_name: str, number_of_days: int) -> str:
    """Render the generation prompt for one skill and time frame.

    Both values are interpolated verbatim; the prompt is only ever sent as text.
    """
    return f"""{ROADMAP_PERSONA}
Generate a JSON object ONLY (no markdown, no code fences, no commentary) for a beginner-friendly learning roadmap to master "{skill_name}" in {number_of_days} days.

Strict JSON schema (all fields required):
{ROADMAP_SCHEMA}

Guidelines:
- Keep it practical and achievable for {number_of_days} days
- Balance theory with hands-on exercises
- Ensure every topic includes at least 1-2 specific resources with working URLs
- Also include a general resources section for broader learning
- Make phase names and goals motivating
- Output VALID JSON ONLY."""
