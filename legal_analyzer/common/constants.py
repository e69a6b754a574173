SENTENCE_BOUNDARY_PATTERN = r'[.!?]+(?=\s)'

KEY_TERMS = "keyTerms"
RISKS = "risks"
OBLIGATIONS = "obligations"

SEQUENTIAL = "sequential"
CONCURRENT = "concurrent"

ANALYZER_SYSTEM_PROMPT = (
  "You are a legal document analyzer. Analyze the provided text and extract "
  "key terms, risks, and obligations. Return the results in a JSON format "
  "with three arrays: keyTerms, risks, and obligations."
)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey",
                      "content-type"]
