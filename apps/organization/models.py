from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models
import uuid


class Entity(models.Model):
    """
    Organization profile printed on reports.

    At most one row exists. Images are stored inline as data URLs.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    full_name = models.CharField(max_length=300)
    document_number = models.CharField(max_length=30, blank=True)
    address = models.CharField(max_length=300, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    email = models.EmailField(blank=True)
    website = models.CharField(max_length=200, blank=True)
    logo_url = models.TextField(blank=True)
    brasao_url = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'entities'
        verbose_name_plural = 'entities'
        ordering = ['created_at']

    def __str__(self):
        return self.name


class LoginOverlay(models.TextChoices):
    DARK = 'dark', 'Dark'
    LIGHT = 'light', 'Light'
    NONE = 'none', 'None'


hex_color_validator = RegexValidator(
    r'^#[0-9a-fA-F]{6}$',
    'Enter a color as #rrggbb.'
)


def default_available_balance():
    return settings.DEFAULT_AVAILABLE_BALANCE


class AppSettings(models.Model):
    """
    Application settings, a single row with pk 1.

    Report header/footer, branding images, the available balance shown on
    the dashboard and the login page theme.
    """

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)

    # Reports
    header_text = models.CharField(max_length=300, blank=True)
    footer_text = models.CharField(max_length=300, blank=True)
    logo_url = models.TextField(blank=True)
    brasao_url = models.TextField(blank=True)
    entity = models.ForeignKey(
        Entity,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )

    # Dashboard
    available_balance = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=default_available_balance
    )

    # Login page theme
    login_background = models.TextField(blank=True)
    login_logo = models.TextField(blank=True)
    login_card_bg_color = models.CharField(max_length=7, default='#ffffff', validators=[hex_color_validator])
    login_card_text_color = models.CharField(max_length=7, default='#1a1a1a', validators=[hex_color_validator])
    login_button_bg_color = models.CharField(max_length=7, default='#4c4faf', validators=[hex_color_validator])
    login_button_text_color = models.CharField(max_length=7, default='#ffffff', validators=[hex_color_validator])
    login_background_overlay = models.CharField(
        max_length=10,
        choices=LoginOverlay.choices,
        default=LoginOverlay.DARK
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'app_settings'
        verbose_name = 'application settings'
        verbose_name_plural = 'application settings'

    def __str__(self):
        return 'Application settings'

    @classmethod
    def load(cls):
        """Return the settings row, creating it with defaults on first use."""
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_ID)
        return obj
