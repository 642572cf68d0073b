"""
Email templates for contact inquiries.

Placeholders use ``{{name}}`` syntax. HTML templates receive escaped
values; see :func:`render`.
"""

import html
from typing import Any

ARCHIVE_SIGNATURE = "OKYENA COLLECTIVE - DIGITAL HERITAGE ARCHIVE"
ARCHIVE_TAGLINE = "Preserving Ghana's cultural heritage through technology"

INQUIRY_SUBJECT = "[OKYENA COLLECTIVE] {{subject}}"

INQUIRY_TEXT = """\
OKYENA COLLECTIVE - NEW CONTACT INQUIRY

FROM: {{name}} <{{email}}>
SUBJECT: {{subject}}

MESSAGE:
{{message}}

---
This message was sent from the Okyena Collective contact form.
Reply directly to this email to respond to {{name}}.

{{signature}}
{{tagline}}
"""

INQUIRY_HTML = """\
<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"></head>
  <body style="font-family: 'Courier New', monospace; line-height: 1.6; color: #333;">
    <h1>OKYENA COLLECTIVE - NEW CONTACT INQUIRY</h1>
    <p><strong>FROM:</strong> {{name}} &lt;{{email}}&gt;</p>
    <p><strong>SUBJECT:</strong> {{subject}}</p>
    <div style="padding: 15px; background-color: #f5f5f5; border: 1px solid #ddd;">{{message}}</div>
    <p style="font-size: 12px; color: #666;">
      Reply directly to this email to respond to {{name}}.<br>
      {{signature}}<br>{{tagline}}
    </p>
  </body>
</html>
"""

AUTO_REPLY_SUBJECT = "Thank you for contacting Okyena Collective"

AUTO_REPLY_TEXT = """\
THANK YOU FOR CONTACTING OKYENA COLLECTIVE

Dear {{name}},

Thank you for reaching out to the Okyena Collective. We have received your
message regarding "{{subject}}" and appreciate your interest in our digital
heritage preservation work.

Our team will review your inquiry and respond within 24 hours.

Your Message:
{{message}}

Best regards,
The Okyena Collective Team

---
{{signature}}
{{tagline}}
"""

AUTO_REPLY_HTML = """\
<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"></head>
  <body style="font-family: 'Courier New', monospace; line-height: 1.6; color: #333;">
    <h1>THANK YOU FOR CONTACTING OKYENA COLLECTIVE</h1>
    <p>Dear {{name}},</p>
    <p>We have received your message regarding "{{subject}}" and will respond within 24 hours.</p>
    <div style="padding: 15px; background-color: #f5f5f5; border: 1px solid #ddd;">{{message}}</div>
    <p>Best regards,<br>The Okyena Collective Team</p>
    <p style="font-size: 12px; color: #666;">{{signature}}<br>{{tagline}}</p>
  </body>
</html>
"""


def render(template: str, variables: dict[str, Any], *, as_html: bool = False) -> str:
    """Render template with variables."""
    result = template
    for key, value in variables.items():
        text = str(value)
        if as_html:
            text = html.escape(text).replace("\n", "<br>")
        result = result.replace(f"{{{{{key}}}}}", text)
    return result
