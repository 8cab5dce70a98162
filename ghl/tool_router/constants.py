"""
Constants and configuration for tool routing.

Centralizes budgets, fallbacks and the general-purpose tool allowlist.
"""

# Default ceiling on tools handed to the LLM (OpenAI's hard limit is 128)
DEFAULT_MAX_TOOLS = 120

# How many previous conversation turns feed intent detection
CONTEXT_WINDOW = 3

# Used when no category keyword matches the message
DEFAULT_INTENTS = ('contact_management', 'communication', 'location')

# Broadly useful operations used to top up an under-filled selection
GENERAL_TOOL_NAMES = (
    'get_location',
    'search_contacts',
    'get_contact',
    'create_contact',
    'update_contact',
    'get_conversation',
    'create_conversation',
    'send_message',
    'get_opportunity',
    'create_opportunity',
    'get_calendar_appointments',
    'create_calendar_appointment',
)
