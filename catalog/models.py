import logging

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from catalog.dates import full_name, iso_date, medium_date, record_url

logger = logging.getLogger(__name__)


class CatalogModel(models.Model):
    """Validates every write with full_clean() before it reaches the database."""

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        creating = self._state.adding
        try:
            self.full_clean(exclude=self.clean_exclude())
        except ValidationError as e:
            logger.warning(
                f"Rejected {self.__class__.__name__} write, "
                f"invalid fields: {sorted(e.message_dict)}"
            )
            raise
        super().save(*args, **kwargs)
        if creating:
            logger.info(f"{self.__class__.__name__} {self.pk} created")

    def clean_exclude(self):
        return None


class Author(CatalogModel):
    first_name = models.CharField(max_length=100)
    family_name = models.CharField(max_length=100)

    date_of_birth = models.DateField(null=True, blank=True)
    date_of_death = models.DateField(null=True, blank=True)

    class Meta:
        ordering = ["family_name", "first_name"]

    @staticmethod
    def validate_dates_of_birth_and_death(date_of_birth, date_of_death, error_to_raise):
        if date_of_birth and date_of_death and date_of_birth > date_of_death:
            raise error_to_raise("Date of death should be after date of birth")

    def clean(self):
        try:
            Author.validate_dates_of_birth_and_death(
                self.date_of_birth, self.date_of_death, ValidationError
            )
        except ValidationError as e:
            raise ValidationError({"date_of_death": e.messages})

    @property
    def name(self) -> str:
        return full_name(self.first_name, self.family_name)

    @property
    def url(self) -> str:
        return record_url("author", self.pk)

    @property
    def date_of_birth_formatted(self) -> str:
        return medium_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return medium_date(self.date_of_death)

    @property
    def date_of_birth_yyyy_mm_dd(self) -> str:
        return iso_date(self.date_of_birth)

    @property
    def date_of_death_yyyy_mm_dd(self) -> str:
        return iso_date(self.date_of_death)

    def get_absolute_url(self):
        return self.url

    def __str__(self):
        return self.name


class Book(CatalogModel):
    title = models.CharField(max_length=200)
    author = models.ForeignKey(
        Author,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name="books",
    )
    summary = models.TextField(
        max_length=1000, help_text="Enter a brief description of the book"
    )
    isbn = models.CharField(
        "ISBN",
        max_length=13,
        unique=True,
        help_text="13 Character ISBN number",
    )

    class Meta:
        ordering = ["title"]

    @property
    def url(self) -> str:
        return record_url("book", self.pk)

    def get_absolute_url(self):
        return self.url

    def __str__(self):
        return self.title


class BookInstance(CatalogModel):
    class Status(models.TextChoices):
        AVAILABLE = "Available", "Available"
        MAINTENANCE = "Maintenance", "Maintenance"
        LOANED = "Loaned", "Loaned"
        RESERVED = "Reserved", "Reserved"

    # Weak reference: deleting the book leaves its instances untouched.
    book = models.ForeignKey(
        Book,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="instances",
    )
    imprint = models.CharField(max_length=200)
    status = models.CharField(
        max_length=11, choices=Status.choices, default=Status.MAINTENANCE
    )
    due_back = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["due_back"]

    def clean_exclude(self):
        # An unchanged reference may point at a deleted book.
        if (
            not self._state.adding
            and self.book_id is not None
            and BookInstance.objects.filter(pk=self.pk, book_id=self.book_id).exists()
        ):
            return ["book"]
        return None

    @property
    def url(self) -> str:
        return record_url("bookinstance", self.pk)

    @property
    def due_back_formatted(self) -> str:
        return medium_date(self.due_back)

    @property
    def due_back_yyyy_mm_dd(self) -> str:
        return iso_date(self.due_back)

    def get_absolute_url(self):
        return self.url

    def __str__(self):
        return f"{self.pk} ({self.imprint})"
