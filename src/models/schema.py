"""
JSON schema for the structured ticket output.

Sent to the model verbatim as the response contract; TicketRecord validates
the parsed response against the same shape.
"""

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}

TICKET_SCHEMA = {
    "type": "object",
    "properties": {
        "eventDetails": {
            "type": "object",
            "properties": {
                "artistOrEvent": _STRING,
                "venue": _STRING,
                "date": _STRING,
                "seatInfo": _STRING,
                "personalMessage": _STRING,
            },
            "required": ["artistOrEvent", "venue", "date"],
        },
        "visualTheme": {
            "type": "object",
            "properties": {
                "colorPalette": _STRING_LIST,
                "textures": _STRING_LIST,
                "typography": {
                    "type": "object",
                    "properties": {
                        "headlineFont": _STRING,
                        "bodyFont": _STRING,
                    },
                },
                "moodKeywords": _STRING_LIST,
                "iconIdeas": _STRING_LIST,
            },
        },
        "aiPrompts": {
            "type": "object",
            "properties": {
                "backgroundPrompt": _STRING,
                "ticketArtPrompt": _STRING,
            },
        },
        "giftCopy": {
            "type": "object",
            "properties": {
                "ticketTitle": _STRING,
                "tagline": _STRING,
                "emotionalDescription": _STRING,
                "giftMessage": _STRING,
            },
        },
        "layoutGuide": {
            "type": "object",
            "properties": {
                "recommendedLayout": _STRING,
                "hierarchyNotes": _STRING,
                "fontWeights": {
                    "type": "object",
                    "properties": {
                        "eventName": _STRING,
                        "seatInfo": _STRING,
                        "extras": _STRING,
                    },
                },
            },
        },
    },
    "required": ["eventDetails"],
}
