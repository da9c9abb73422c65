"""
Plantillas HTML de los emails de la lista de espera (welcome, launch, update).
Funciones puras: no envían nada, solo arman asunto, HTML y texto plano.
"""
from dataclasses import dataclass
from html import escape

BRAND = "CampusConnect"


@dataclass
class RenderedEmail:
    subject: str
    html: str
    text: str


def _layout(header_title: str, header_subtitle: str, body_html: str) -> str:
    return f"""
        <!DOCTYPE html>
        <html>
        <head>
            <meta charset="utf-8">
            <meta name="viewport" content="width=device-width, initial-scale=1.0">
        </head>
        <body style="font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
            <div style="background: linear-gradient(135deg, #0F172A 0%, #10B981 100%); padding: 30px; border-radius: 12px 12px 0 0; text-align: center;">
                <h1 style="color: white; margin: 0; font-size: 28px;">{header_title}</h1>
                <p style="color: white; margin: 8px 0 0 0;">{header_subtitle}</p>
            </div>

            <div style="background: #ffffff; padding: 30px; border: 1px solid #e5e7eb; border-top: none; border-radius: 0 0 12px 12px;">
                {body_html}
            </div>

            <p style="text-align: center; font-size: 12px; color: #9ca3af; margin-top: 20px;">
                © 2025 {BRAND}<br>
                You're receiving this because you signed up for launch notifications.
            </p>
        </body>
        </html>
        """


def _feature_box(title: str, description: str) -> str:
    return f"""
                <div style="background: #f0fdf4; padding: 20px; margin: 15px 0; border-radius: 8px; border-left: 4px solid #10B981;">
                    <h4 style="color: #333; margin: 0 0 8px 0;">{title}</h4>
                    <p style="margin: 0;">{description}</p>
                </div>
    """


def render_welcome_email(first_name: str) -> RenderedEmail:
    name = escape(first_name)
    body = f"""
                <h2 style="color: #10B981; margin-top: 0;">Hi {name}! 👋</h2>

                <p>Thank you for signing up to be notified about {BRAND}! We're thrilled to have you on board.</p>

                <p><strong>What is {BRAND}?</strong></p>
                <p>{BRAND} is the platform designed to make campus life easier. We're building something special that will help students:</p>

                <ul>
                    <li>📅 Stay updated on campus events</li>
                    <li>🎭 Discover and join club activities</li>
                    <li>🛠️ Submit and track service requests</li>
                    <li>📚 Access essential student tools</li>
                    <li>🤝 Connect with fellow students</li>
                </ul>

                <p>We're putting the finishing touches on {BRAND} and will notify you the moment it's ready!</p>

                <p>Stay tuned,<br>The {BRAND} Team</p>
    """

    text = f"""
Welcome to {BRAND}!

Hi {first_name},

Thank you for signing up to be notified about {BRAND}! We're thrilled to have you on board.

We're putting the finishing touches on {BRAND} and will notify you the moment it's ready!

Stay tuned,
The {BRAND} Team
    """

    return RenderedEmail(
        subject=f"🚀 Welcome to {BRAND} - You're In!",
        html=_layout(f"🚀 Welcome to {BRAND}!", "Get ready for something amazing", body),
        text=text,
    )


def render_launch_email(first_name: str, site_url: str) -> RenderedEmail:
    name = escape(first_name)
    url = escape(site_url, quote=True)
    features = "".join([
        _feature_box("📅 Campus Events Hub", "Discover upcoming events, workshops, and activities happening on campus."),
        _feature_box("🎭 Club Directory", "Find and join clubs that match your interests and passions."),
        _feature_box("🛠️ Service Requests", "Submit maintenance requests, tech support, and other campus services."),
        _feature_box("📚 Student Tools", "Access essential tools and resources for academic success."),
    ])
    body = f"""
                <h2 style="color: #10B981; margin-top: 0;">Hi {name}! 🚀</h2>

                <p>The moment you've been waiting for is here! {BRAND} is officially live and ready to transform your campus experience.</p>

                <div style="text-align: center;">
                    <a href="{url}" style="background: #10B981; color: white; padding: 15px 30px; text-decoration: none; border-radius: 8px; display: inline-block; margin: 20px 0; font-weight: bold;">🚀 Launch {BRAND} Now</a>
                </div>

                <h3 style="color: #333;">🌟 What's Available Right Now:</h3>
                {features}

                <p>Thank you for being an early supporter. We can't wait to see how {BRAND} enhances your campus life!</p>

                <p>Welcome aboard,<br>The {BRAND} Team 🎓</p>
    """

    text = f"""
{BRAND} is NOW LIVE!

Hi {first_name},

The moment you've been waiting for is here! {BRAND} is officially live.

Get started: {site_url}

Welcome aboard,
The {BRAND} Team
    """

    return RenderedEmail(
        subject=f"🎉 {BRAND} is NOW LIVE!",
        html=_layout(f"🎉 {BRAND} is NOW LIVE!", "The wait is over - dive into the future of campus life!", body),
        text=text,
    )


def render_update_email(first_name: str, title: str, content: str) -> RenderedEmail:
    name = escape(first_name)
    # Respetar saltos de línea del contenido escrito por el admin
    content_html = escape(content).replace("\n", "<br>")
    body = f"""
                <h2 style="color: #10B981; margin-top: 0;">Hi {name}! 👋</h2>

                <p>We have an exciting update to share with you about {BRAND}:</p>

                <div style="background: #f0fdf4; padding: 25px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #10B981;">
                    <h3 style="color: #333; margin-top: 0;">{escape(title)}</h3>
                    <p style="margin: 0;">{content_html}</p>
                </div>

                <p>Stay tuned for more updates as we get closer to launch!</p>

                <p>Best regards,<br>The {BRAND} Team</p>
    """

    text = f"""
{BRAND} Update: {title}

Hi {first_name},

{content}

Stay tuned for more updates as we get closer to launch!

Best regards,
The {BRAND} Team
    """

    return RenderedEmail(
        subject=f"📢 {BRAND} Update: {title}",
        html=_layout(f"📢 {BRAND} Update", escape(title), body),
        text=text,
    )
