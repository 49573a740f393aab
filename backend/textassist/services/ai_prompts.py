"""
Prompt templates for the completion shapes (constants only, no logic).

1. Suggestions: three short autocomplete continuations, one per line.
2. Text: the caller's prompt is forwarded verbatim, no system message.
3. Next step: one actionable step plus a one-sentence rationale, labelled so
   the response can be parsed line by line.
"""

SUGGESTIONS_SYSTEM_PROMPT = "You generate 3 short autocomplete suggestions."

# Placeholder: {text}
SUGGESTIONS_USER_PROMPT = (
    "Suggest 3 concise continuations for: {text}\n"
    "Return exactly 3 short continuations, one per line, without bullets or numbers."
)

NEXT_STEP_SYSTEM_PROMPT = "Return a single actionable next step and one-sentence rationale."

# Placeholder: {task}
NEXT_STEP_USER_PROMPT = """Task: {task}
Please provide:
1. The next actionable step for this task
2. A brief rationale (one sentence)

Format your response as:
Next Step: [specific action]
Rationale: [brief explanation]"""

# Gemini output budgets per shape
SUGGESTIONS_MAX_OUTPUT_TOKENS = 150
TEXT_MAX_OUTPUT_TOKENS = 1000
NEXT_STEP_MAX_OUTPUT_TOKENS = 150
