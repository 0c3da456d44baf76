"""All magic values live here — no inline literals anywhere else."""

# Gemini generation endpoint
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-flash-latest"
GEMINI_GENERATE_PATH = "{base}/models/{model}:generateContent"
GEMINI_KEY_PARAM = "key"

# Low temperature and a bounded token budget keep the output parseable.
GENERATION_CONFIG = {
    "temperature": 0.4,
    "topK": 32,
    "topP": 1,
    "maxOutputTokens": 2048,
}

CATEGORIES = ("grocery", "utensil", "clothing", "miscellaneous")

RECEIPT_PROMPT = (
    "You are an expert at reading receipts and extracting structured data. "
    "Given an image of a bill or receipt, extract the following information:\n"
    "\n"
    "1. List of items with their names, categories, and individual amounts\n"
    "2. Total amount of the bill\n"
    "3. Date of purchase\n"
    "\n"
    f"For categories, use one of these: {', '.join(CATEGORIES)}\n"
    "\n"
    "Return the result as clean JSON in this exact format:\n"
    "{\n"
    '  "items": [\n'
    '    {"name": "Item Name", "category": "grocery", "amount": 123.45}\n'
    "  ],\n"
    '  "total": 1234.56,\n'
    '  "date": "2025-01-15"\n'
    "}\n"
    "\n"
    "Important rules:\n"
    "- Only return valid JSON, no other text\n"
    "- If you cannot read the image clearly, return an empty items array\n"
    '- Use "miscellaneous" category if unsure\n'
    "- Format date as YYYY-MM-DD\n"
    "- Amounts should be numbers, not strings\n"
    "- If no date is visible, use today's date"
)

# Config defaults
DEFAULT_RUNTIME_CONFIG_PATH = ".runtimeconfig.json"
DEFAULT_INFERENCE_TIMEOUT = "60"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = "8080"
TRUTHY = frozenset({"1", "true", "yes", "on"})

# Third-party loggers that would print the credential-bearing request URL
QUIET_LOGGERS = ("httpx", "httpcore")

# HTTP surface
ROUTE_ANALYZE = "/analyzeReceipt"
ROUTE_HEALTH = "/health"
BEARER_PREFIX = "bearer "

# Error kinds → HTTP status
KIND_INVALID_ARGUMENT = "invalid-argument"
KIND_FAILED_PRECONDITION = "failed-precondition"
KIND_UNAUTHENTICATED = "unauthenticated"
KIND_INTERNAL = "internal"
KIND_HTTP_STATUS = {
    KIND_INVALID_ARGUMENT: 400,
    KIND_FAILED_PRECONDITION: 400,
    KIND_UNAUTHENTICATED: 401,
    KIND_INTERNAL: 500,
}

# Caller-facing error messages
MSG_MISSING_IMAGE = "Missing image data or mime type"
MSG_INVALID_BODY = "Request body must be a JSON object"
MSG_NO_API_KEY = "Gemini API key not configured"
MSG_UNAUTHENTICATED = "The function must be called while authenticated."
MSG_GEMINI_STATUS = "Gemini API error: %s"
MSG_NO_MODEL_TEXT = "Failed to get response from Gemini"
MSG_PARSE_FAILED = "Failed to parse receipt data"
MSG_ANALYZE_FAILED = "Failed to analyze receipt"

# Log messages
MSG_SERVER_STARTING = "Starting receipt analysis server on %s:%s"
MSG_KEY_MISSING_WARNING = "GEMINI_API_KEY not set — requests will fail until it is configured"
MSG_RUNTIME_CONFIG_FAILED = "Runtime config load failed: %s"
MSG_GEMINI_ERROR_LOG = "Gemini API error: %s %s"
MSG_NO_MODEL_TEXT_LOG = "No text in Gemini response"
MSG_PARSE_FAILED_LOG = "Failed to parse JSON: %s"
MSG_ANALYZE_FAILED_LOG = "Error analyzing receipt"
MSG_CALLER_IDENTITY = "Caller identity present: %s"
MSG_ANALYZED = "✓ Analyzed receipt: %d item(s) (%.1fs)"
