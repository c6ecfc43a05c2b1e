from rest_framework import serializers
from rest_framework.exceptions import ValidationError

from catalog.models import Author, Book, BookInstance


class AuthorSerializer(serializers.ModelSerializer):
    name = serializers.ReadOnlyField()
    url = serializers.ReadOnlyField()
    date_of_birth_formatted = serializers.ReadOnlyField()
    date_of_death_formatted = serializers.ReadOnlyField()
    date_of_birth_yyyy_mm_dd = serializers.ReadOnlyField()
    date_of_death_yyyy_mm_dd = serializers.ReadOnlyField()

    def validate(self, attrs):
        date_of_birth = attrs.get(
            "date_of_birth", getattr(self.instance, "date_of_birth", None)
        )
        date_of_death = attrs.get(
            "date_of_death", getattr(self.instance, "date_of_death", None)
        )
        try:
            Author.validate_dates_of_birth_and_death(
                date_of_birth, date_of_death, ValidationError
            )
        except ValidationError as e:
            raise ValidationError({"date_of_death": e.detail})
        return attrs

    class Meta:
        model = Author
        fields = (
            "id",
            "first_name",
            "family_name",
            "date_of_birth",
            "date_of_death",
            "name",
            "url",
            "date_of_birth_formatted",
            "date_of_death_formatted",
            "date_of_birth_yyyy_mm_dd",
            "date_of_death_yyyy_mm_dd",
        )
        read_only_fields = ("id",)


class BookSerializer(serializers.ModelSerializer):
    url = serializers.ReadOnlyField()

    class Meta:
        model = Book
        fields = ("id", "title", "author", "summary", "isbn", "url")
        read_only_fields = ("id",)


class BookInstanceSerializer(serializers.ModelSerializer):
    url = serializers.ReadOnlyField()
    due_back_formatted = serializers.ReadOnlyField()
    due_back_yyyy_mm_dd = serializers.ReadOnlyField()

    class Meta:
        model = BookInstance
        fields = (
            "id",
            "book",
            "imprint",
            "status",
            "due_back",
            "url",
            "due_back_formatted",
            "due_back_yyyy_mm_dd",
        )
        read_only_fields = ("id",)
