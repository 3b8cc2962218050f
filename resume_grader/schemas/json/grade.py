# Response schema in the OpenAPI subset accepted by Gemini's
# generationConfig.responseSchema.
SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "grade": {"type": "STRING", "enum": ["S", "A", "B", "C"]},
        "red_flags": {"type": "ARRAY", "items": {"type": "STRING"}},
        "yellow_flags": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["grade", "red_flags", "yellow_flags"],
    "propertyOrdering": ["grade", "red_flags", "yellow_flags"],
}
