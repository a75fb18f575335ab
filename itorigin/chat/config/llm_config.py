"""
llm_config.py: LLM Temperature & Token Settings
=================================================
No temperatures or max_tokens should be hardcoded inside service files.
"""

# ── Website Assistant Reply ────────────────────────────────────────────────────
# Friendly B2B tone; moderately creative but anchored by the system prompt.
LLM_CHAT_TEMPERATURE = 0.7
LLM_CHAT_MAX_TOKENS  = 1000
