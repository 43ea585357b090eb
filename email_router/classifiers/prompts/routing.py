"""
Classification, reply drafting and action-item prompts for inbound email.
"""

from email_router.core.models import Category

CLASSIFY_PROMPT = """Classify the following email into a category, assign a priority, suggest a recipient, and write a brief summary.

Categories: {categories}
Priorities: {priorities}
Recipients: {recipients}

GUIDELINES:
- Pick the recipient whose team should own the email
- "High" priority means something is broken, blocked, or due very soon
- Keep the summary to one or two sentences

Email content:
```
{email_content}
```

Provide the output in JSON format."""


DRAFT_RESPONSE_PROMPT = """Draft a polite and concise email response to the original email below, taking its classification and suggested recipient into account.

Original email content:
```
{email_content}
```

Classification details:
Category: {category}
Priority: {priority}
Suggested Recipient: {suggested_recipient}
Summary: {summary}

Write the response as a {role}. Acknowledge the sender's request and either suggest next steps or provide the relevant information."""


ACTION_ITEMS_PROMPT = """From the following email content, identify and list every distinct actionable item. Return them as a JSON array of strings. If there is nothing to act on, return an empty array.

Email content:
```
{email_content}
```

Example output:
["Action item 1", "Action item 2"]"""


# Perspective the reply draft is written from
CATEGORY_ROLES = {
    Category.SUPPORT: "customer support agent",
    Category.SALES: "sales representative",
    Category.MARKETING: "marketing coordinator",
    Category.BILLING: "billing specialist",
    Category.GENERAL_INQUIRY: "customer service representative",
}
