import pytest

from replypilot.models.review import ErrorResponse, ReviewRequest


class TestReviewRequest:
    def test_all_defaults(self):
        request = ReviewRequest.model_validate({})
        assert request.marketplace == "Shopee"
        assert request.rating == 5.0
        assert request.product_name == "the product"
        assert request.language == "english"
        assert request.review_text == ""

    def test_camel_case_aliases(self):
        request = ReviewRequest.model_validate(
            {"productName": "Wireless Mouse", "reviewText": "Nasira agad."}
        )
        assert request.product_name == "Wireless Mouse"
        assert request.review_text == "Nasira agad."

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_context_fields_default(self, value):
        request = ReviewRequest.model_validate({"marketplace": value, "productName": value})
        assert request.marketplace == "Shopee"
        assert request.product_name == "the product"

    def test_null_fields_never_fail(self):
        request = ReviewRequest.model_validate(
            {"marketplace": None, "rating": None, "productName": None, "language": None, "reviewText": None}
        )
        assert request.rating == 5.0
        assert request.language == "english"
        assert request.review_text == ""

    def test_language_normalized(self):
        assert ReviewRequest(language=" Taglish ").language == "taglish"

    def test_rating_coerced_from_string(self):
        assert ReviewRequest.model_validate({"rating": "2"}).rating == 2.0
        assert ReviewRequest.model_validate({"rating": "bad"}).rating == 5.0

    def test_non_string_scalars_become_text(self):
        request = ReviewRequest.model_validate({"marketplace": 42, "reviewText": 123})
        assert request.marketplace == "42"
        assert request.review_text == "123"


def test_error_response_omits_missing_details():
    assert ErrorResponse(error="x").model_dump(exclude_none=True) == {"error": "x"}
