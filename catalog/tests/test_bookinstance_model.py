from datetime import datetime, timezone as dt_timezone

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone

from catalog.models import Author, Book, BookInstance


class BookInstanceModelTests(TestCase):
    def setUp(self):
        self.author = Author.objects.create(first_name="Mary", family_name="Shelley")
        self.book = Book.objects.create(
            title="Frankenstein",
            author=self.author,
            summary="A scientist creates a living being.",
            isbn="9780141439471",
        )

    def sample_instance(self, **params):
        defaults = {
            "book": self.book,
            "imprint": "Penguin Classics, 2003",
        }
        defaults.update(params)
        return BookInstance.objects.create(**defaults)

    def test_defaults(self):
        before = timezone.now()
        instance = self.sample_instance()
        after = timezone.now()

        self.assertEqual(instance.status, BookInstance.Status.MAINTENANCE)
        self.assertEqual(instance.status, "Maintenance")
        self.assertTrue(before <= instance.due_back <= after)

    def test_url(self):
        instance = self.sample_instance()

        self.assertEqual(instance.url, f"/catalog/bookinstance/{instance.pk}")
        self.assertEqual(instance.get_absolute_url(), instance.url)

    def test_due_back_virtuals(self):
        instance = self.sample_instance(
            due_back=datetime(2023, 4, 10, 12, 0, tzinfo=dt_timezone.utc)
        )

        self.assertEqual(instance.due_back_formatted, "Apr 10, 2023")
        self.assertEqual(instance.due_back_yyyy_mm_dd, "2023-04-10")

    def test_due_back_virtuals_empty_without_date(self):
        instance = BookInstance(book=self.book, imprint="Unsaved", due_back=None)

        self.assertEqual(instance.due_back_formatted, "")
        self.assertEqual(instance.due_back_yyyy_mm_dd, "")

    def test_status_outside_choices_invalid(self):
        with self.assertRaises(ValidationError) as ctx:
            self.sample_instance(status="Borrowed")

        self.assertIn("status", ctx.exception.message_dict)
        self.assertFalse(BookInstance.objects.exists())

    def test_status_required(self):
        with self.assertRaises(ValidationError) as ctx:
            self.sample_instance(status="")

        self.assertIn("status", ctx.exception.message_dict)
        self.assertFalse(BookInstance.objects.exists())

    def test_status_changes_freely(self):
        instance = self.sample_instance(status=BookInstance.Status.LOANED)

        for status in (
            BookInstance.Status.AVAILABLE,
            BookInstance.Status.RESERVED,
            BookInstance.Status.MAINTENANCE,
        ):
            instance.status = status
            instance.save()
            instance.refresh_from_db()
            self.assertEqual(instance.status, status)

    def test_imprint_required(self):
        with self.assertRaises(ValidationError) as ctx:
            BookInstance.objects.create(book=self.book)

        self.assertIn("imprint", ctx.exception.message_dict)

    def test_book_required(self):
        with self.assertRaises(ValidationError) as ctx:
            BookInstance.objects.create(imprint="Orphan")

        self.assertIn("book", ctx.exception.message_dict)
