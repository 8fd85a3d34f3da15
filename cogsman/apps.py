from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CogsmanConfig(AppConfig):
    name = "cogsman"
    verbose_name = _("Cost of Goods Sold")
