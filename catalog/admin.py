from django.contrib import admin

from catalog.models import Author, Book, BookInstance


@admin.register(Author)
class AuthorAdmin(admin.ModelAdmin):
    list_display = ("name", "date_of_birth_formatted", "date_of_death_formatted")
    fields = ["first_name", "family_name", ("date_of_birth", "date_of_death")]


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    list_display = ("title", "author")


@admin.register(BookInstance)
class BookInstanceAdmin(admin.ModelAdmin):
    list_display = ("book_title", "status", "due_back_formatted")
    list_filter = ("status",)
    # An INNER JOIN on book would hide instances whose book was deleted.
    list_select_related = False

    @admin.display(description="Book")
    def book_title(self, obj):
        try:
            return obj.book.title
        except Book.DoesNotExist:
            return f"Deleted book #{obj.book_id}"
