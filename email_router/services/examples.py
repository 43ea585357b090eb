"""
Built-in sample emails for trying the classifier.
"""

from email_router.core.models import ExampleEmail

EXAMPLE_EMAILS: list[ExampleEmail] = [
    ExampleEmail(
        label="Support Request",
        content="""From: customer@example.com
Subject: Urgent Support Request - Order #54321

Dear Support Team,

I am writing to report a critical issue with my recent order, #54321. The item I received does not work, and I need help right away. The troubleshooting steps from the manual did not resolve the problem.

Please let me know how to proceed with a replacement or repair. My phone number is +1 (555) 123-4567.

Thank you,
A Frustrated Customer""",
    ),
    ExampleEmail(
        label="Sales Inquiry",
        content="""From: potentialclient@business.com
Subject: Inquiry about your Enterprise Software Solutions

To Whom It May Concern,

Our company would like to learn more about your enterprise software, specifically the CRM and project management tools. We need a solution that scales to a team of 50+ users.

Could you send a brochure or schedule a demo with a sales representative? We are available next Tuesday or Thursday afternoon.

Best regards,
Sarah Johnson
Head of Operations""",
    ),
    ExampleEmail(
        label="Finance / Billing",
        content="""From: accounts@supplier.com
Subject: Invoice #2024-00123 Due Date Reminder

Dear Valued Client,

This is a friendly reminder that Invoice #2024-00123 for $1,500.00 is due on October 26, 2024. Please pay on time to avoid any service interruption.

You can view the invoice and pay through our portal: [link to portal]

Thank you for your business.

Sincerely,
Accounts Department""",
    ),
    ExampleEmail(
        label="Urgent Incident",
        content="""From: systemalert@company.com
Subject: CRITICAL: Database Server Offline - Incident #9876

HIGH PRIORITY INCIDENT

The main production database server (DB-PROD-01) went offline at 14:35 UTC. All customer-facing services are affected. The incident response team has been notified.

Check the incident dashboard for live updates: [link to dashboard]

System Administrator""",
    ),
    ExampleEmail(
        label="Spam / Marketing",
        content="""From: offer@bestdeals.net
Subject: EXCLUSIVE OFFER: Get 50% Off Your Next Purchase!

Hi there,

Don't miss our limited-time offer! Get 50% off every product in our store. Click the link below to unlock your discount:

[Spammy Link]

This offer expires soon!

Best regards,
The Best Deals Team""",
    ),
]
