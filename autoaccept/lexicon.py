"""
Scoring vocabulary (English and Portuguese).
Phrases are stored as written; they are normalized before matching, so
accented and plain spellings of the same phrase each count once.
"""

# Identifiers of the tool whose prompts are being watched
TOPIC_WORDS = (
    "codex",
    "chatgpt",
)

APPROVAL_STRONG_PHRASES = (
    "allow once", "allow always", "approve", "accept", "permission request",
)

APPROVAL_WORDS = (
    "allow", "yes", "confirm", "permission",
    "permitir", "aceitar", "sim", "confirmar", "permissao", "permissão",
)

NEXT_STEP_PHRASES = (
    "next step", "next steps", "next-step",
    "proximo passo", "próximo passo",
    "proxima etapa", "próxima etapa",
    "proximos passos", "próximos passos",
    "proximas etapas", "próximas etapas",
)

CONTINUE_SUGGESTION_PHRASES = (
    "se quiser", "if you want", "i can continue", "can continue",
    "quer que eu", "posso continuar", "posso seguir", "continue daqui",
    "i can do that next", "i can proceed",
)

# Substrings that make a region look like an approval prompt
PROMPT_MARKERS = ("allow", "permitir", "accept", "aceitar")

# Substrings that make a region look like a continuation suggestion
SUGGESTION_MARKERS = ("next", "proxim", "seguir", "continu")
