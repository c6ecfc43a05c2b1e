from django.contrib import admin
from django.test import TestCase

from catalog.admin import BookInstanceAdmin
from catalog.models import Book, BookInstance


class BookInstanceAdminTests(TestCase):
    def setUp(self):
        self.book = Book.objects.create(
            title="Small Gods",
            summary="A god reduced to a tortoise.",
            isbn="9780552152976",
        )
        self.instance = BookInstance.objects.create(book=self.book, imprint="Corgi, 1993")
        self.model_admin = BookInstanceAdmin(BookInstance, admin.site)

    def test_book_title(self):
        self.assertEqual(self.model_admin.book_title(self.instance), "Small Gods")

    def test_book_title_after_book_deleted(self):
        book_id = self.book.pk
        self.book.delete()
        instance = BookInstance.objects.get(pk=self.instance.pk)

        self.assertEqual(
            self.model_admin.book_title(instance), f"Deleted book #{book_id}"
        )

    def test_changelist_query_keeps_orphaned_instances(self):
        self.book.delete()

        self.assertFalse(self.model_admin.list_select_related)
        self.assertIn(self.instance, self.model_admin.get_queryset(None))
