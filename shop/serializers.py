from rest_framework import serializers

SEARCH_TYPES = ("download", "customer", "user", "discount")


class SearchQuerySerializer(serializers.Serializer):
    """Validate the query string of the dropdown search endpoint."""

    type = serializers.ChoiceField(choices=SEARCH_TYPES)
    q = serializers.CharField(required=False, allow_blank=True, default="")
    number = serializers.IntegerField(required=False, min_value=1, max_value=100)
    variations = serializers.BooleanField(required=False, default=False)
    bundles = serializers.BooleanField(required=False, default=True)


class OptionSerializer(serializers.Serializer):
    """A single dropdown option as returned to the enhanced-search widget."""

    value = serializers.CharField()
    label = serializers.CharField()
