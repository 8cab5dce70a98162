"""
Shared fixtures: a catalogue shaped like the GoHighLevel MCP server's.
"""

import pytest

from ghl.tool_router import ToolDefinition


SAMPLE_TOOL_NAMES = [
    # Contacts
    'create_contact', 'search_contacts', 'get_contact', 'update_contact',
    'delete_contact', 'add_contact_tags', 'remove_contact_tags',
    'get_duplicate_contact', 'add_contact_followers', 'get_contact_appointments',
    # Conversations
    'search_conversations', 'get_conversation', 'create_conversation',
    'send_sms', 'send_email', 'send_message', 'get_message', 'get_email_message',
    # Opportunities
    'search_opportunities', 'get_opportunity', 'create_opportunity',
    'update_opportunity', 'get_pipelines',
    # Calendar
    'get_calendars', 'get_calendar_events', 'get_free_slots',
    'get_calendar_appointments', 'create_calendar_appointment',
    'update_appointment', 'get_availability',
    # Marketing
    'get_campaigns', 'get_workflows', 'add_contact_to_workflow',
    # Content
    'create_blog_post', 'get_blog_posts', 'upload_media_file', 'get_media_files',
    # Commerce
    'create_product', 'list_products', 'create_price', 'list_invoices',
    'create_invoice', 'list_orders', 'get_payment_transactions', 'create_store_shipping_zone',
    # Location
    'get_location', 'search_locations', 'get_location_custom_fields',
    # Analytics
    'get_surveys', 'get_survey_submissions', 'get_stats_report',
    # Social
    'get_social_accounts', 'start_social_oauth', 'get_facebook_pages',
    'get_instagram_accounts', 'get_google_locations',
    # Unmatched
    'ping', 'get_custom_values',
]


def make_tools(names):
    """ToolDefinitions with a trivial schema, in the given order."""
    return [
        ToolDefinition(name=name, description=f"{name} tool", input_schema={'type': 'object'})
        for name in names
    ]


@pytest.fixture
def catalog():
    return make_tools(SAMPLE_TOOL_NAMES)


@pytest.fixture
def raw_catalog():
    return [
        {
            'name': name,
            'description': f"{name} tool",
            'inputSchema': {'type': 'object', 'properties': {}},
        }
        for name in SAMPLE_TOOL_NAMES
    ]


@pytest.fixture
def tools_named():
    """Factory fixture: tools_named(['a', 'b']) -> [ToolDefinition, ...]."""
    return make_tools
