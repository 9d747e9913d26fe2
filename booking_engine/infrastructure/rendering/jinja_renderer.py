from jinja2 import Environment, PackageLoader, select_autoescape

from booking_engine.application.interfaces.contract_renderer import ContractRenderer
from booking_engine.domain.entities.rental_contract import RentalContract


def _format_date(value) -> str:
    return value.strftime("%d.%m.%Y") if value else ""


def _format_timestamp(value) -> str:
    return value.strftime("%d.%m.%Y %H:%M") if value else ""


class JinjaContractRenderer(ContractRenderer):
    """Renders a rental contract as a standalone HTML document."""

    media_type = "text/html"
    file_extension = "html"

    def __init__(self, currency_code: str = "EUR", template_name: str = "rental_contract.html"):
        self._currency_code = currency_code
        self._env = Environment(
            loader=PackageLoader("booking_engine.infrastructure.rendering", "templates"),
            autoescape=select_autoescape(["html"]),
        )
        self._env.filters["date"] = _format_date
        self._env.filters["timestamp"] = _format_timestamp
        self._template = self._env.get_template(template_name)

    def render(self, contract: RentalContract) -> bytes:
        html = self._template.render(
            contract=contract,
            status=contract.status.value,
            currency=self._currency_code,
        )
        return html.encode("utf-8")
