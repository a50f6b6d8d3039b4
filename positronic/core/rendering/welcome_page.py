"""
Welcome Page Generator
======================

Render the application welcome page from Jinja2 templates.
The page shows the configured application name, the product feature cards
and loads the browser bootstrap script.
"""

from typing import Any, Dict, Iterable, List, Optional
from pathlib import Path
import jinja2

from positronic import PRODUCT_NAME
from positronic.config.logging import get_logger
from positronic.config.settings import Settings, get_settings
from positronic.models.schemas import FeatureCard, WelcomePageContext

logger = get_logger(__name__)

TEMPLATE_NAME = "welcome.html"

DEFAULT_FEATURES: List[FeatureCard] = [
    FeatureCard(
        title="Database Management",
        description=(
            "Connect to and manage multiple database types including MySQL, PostgreSQL, "
            "SQLite, SQL Server, and MongoDB. Execute queries, browse data, and perform "
            "administrative tasks with ease."
        ),
    ),
    FeatureCard(
        title="Queue Management",
        description=(
            "Monitor and manage Laravel queues with built-in Horizon dashboard. "
            "Track job processing, failed jobs, and queue performance metrics."
        ),
    ),
    FeatureCard(
        title="Secure Development",
        description=(
            "Built with security in mind featuring SSL encryption, environment-based "
            "configuration, and secure secret management through encrypted environment variables."
        ),
    ),
    FeatureCard(
        title="Docker Ready",
        description=(
            "Complete Docker environment with PHP 8.4, Node.js, MySQL, Nginx with SSL, "
            "Redis for caching and queues, and automated backup solutions."
        ),
    ),
]


class WelcomePageError(Exception):
    """Exception raised when the welcome page cannot be rendered."""

    pass


def html_lang(locale: str) -> str:
    """Convert a locale such as ``en_US`` into an HTML lang value (``en-US``)."""
    return locale.replace("_", "-")


class WelcomePageRenderer:
    """Jinja2-based welcome page renderer."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        features: Optional[Iterable[FeatureCard]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.features = list(features) if features is not None else list(DEFAULT_FEATURES)
        self.logger: Any = logger.bind(renderer="welcome")  # structlog.BoundLoggerBase
        self._setup_jinja2_environment()

    def _setup_jinja2_environment(self) -> None:
        """Setup Jinja2 template environment."""
        template_dir = Path(__file__).parent / "templates"
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            autoescape=jinja2.select_autoescape(["html", "xml"]),
            enable_async=True,
        )

    async def render(self) -> str:
        """
        Render the welcome page.

        Returns:
            Complete HTML document

        Raises:
            WelcomePageError: If template rendering fails
        """
        try:
            template = self.env.get_template(TEMPLATE_NAME)
            context = self._prepare_context()
            html = await template.render_async(**context)

            self.logger.info(
                "Welcome page rendered", template=TEMPLATE_NAME, html_length=len(html)
            )
            return html

        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Welcome page rendering failed", error=error_msg)
            raise WelcomePageError(error_msg) from e
        except Exception as e:
            error_msg = f"Unexpected welcome page error: {e}"
            self.logger.error("Welcome page rendering failed", error=error_msg)
            raise WelcomePageError(error_msg) from e

    def _prepare_context(self) -> Dict[str, Any]:
        """Build the template context from settings and feature cards."""
        context = WelcomePageContext(
            lang=html_lang(self.settings.app_locale),
            app_name=self.settings.app_name,
            product_name=PRODUCT_NAME,
            version=self.settings.app_version,
            features=self.features,
            asset_url=self.settings.asset_url.rstrip("/"),
            alpine_cdn_url=self.settings.alpine_cdn_url,
            alpine_focus_cdn_url=self.settings.alpine_focus_cdn_url,
        )
        return {"page": context}


# Global renderer instance
_renderer: Optional[WelcomePageRenderer] = None


def get_welcome_page_renderer() -> WelcomePageRenderer:
    """Get the global welcome page renderer."""
    global _renderer
    if _renderer is None:
        _renderer = WelcomePageRenderer()
    return _renderer


async def render_welcome_page() -> str:
    """Render the welcome page with the global renderer."""
    return await get_welcome_page_renderer().render()
