"""Tests for turning raw prediction input into instances and labels."""

import numpy as np
import pytest

from classifierTournament.core.exceptions import (
    InvalidNumberError, NoModelError, PredictionInputError, UnknownCategoryError
)
from classifierTournament.core.results import EvaluationResult
from classifierTournament.data.dataset import is_missing
from classifierTournament.models import DecisionTreeModel
from classifierTournament.prediction.encoder import NominalRaw, NumericRaw, PredictionEncoder
from classifierTournament.preprocessing import PreprocessingPipeline


@pytest.fixture
def encoder(weather_dataset):
    return PredictionEncoder(weather_dataset)


class TestEncoding:
    def test_full_width_with_missing_class(self, encoder):
        vector = encoder.encode(["rainy", "70", 96, "FALSE"])
        assert vector.shape == (5,)
        np.testing.assert_array_equal(vector[:4], [2.0, 70.0, 96.0, 1.0])
        assert is_missing(vector[4])

    def test_resolve_tags_values_by_attribute_kind(self, encoder):
        resolved = encoder.resolve(["sunny", " 85 ", "85", "TRUE"])
        assert [type(raw) for raw in resolved] == [NominalRaw, NumericRaw, NumericRaw, NominalRaw]
        assert resolved[1].text == "85"

    def test_nominal_round_trip(self, encoder):
        for label in ("sunny", "overcast", "rainy"):
            assert encoder.decode_nominal("outlook", encoder.encode_nominal("outlook", label)) == label

    def test_unknown_category(self, encoder):
        with pytest.raises(UnknownCategoryError) as info:
            encoder.encode(["foggy", "70", "96", "FALSE"])
        assert info.value.attribute == "outlook"
        assert "sunny, overcast, rainy" in str(info.value)

    def test_category_match_is_case_sensitive(self, encoder):
        with pytest.raises(UnknownCategoryError):
            encoder.encode_nominal("windy", "true")

    @pytest.mark.parametrize("text", ["abc", "inf", "nan", ""])
    def test_invalid_number(self, encoder, text):
        with pytest.raises(InvalidNumberError, match="temperature"):
            encoder.encode(["sunny", text, "70", "TRUE"])

    def test_wrong_number_of_values(self, encoder):
        with pytest.raises(PredictionInputError, match="Expected 4 values"):
            encoder.encode(["sunny", "70", "70"])

    def test_decode_out_of_range(self, encoder):
        with pytest.raises(PredictionInputError):
            encoder.decode_class(2)
        assert encoder.decode_class(1) == "no"

    def test_unknown_attribute_name(self, encoder):
        with pytest.raises(PredictionInputError, match="Unknown attribute"):
            encoder.encode_nominal("pressure", "high")

    def test_numeric_attribute_is_not_nominal(self, encoder):
        with pytest.raises(PredictionInputError, match="not nominal"):
            encoder.encode_nominal("humidity", "80")


class TestPredict:
    def test_without_winner(self, encoder):
        with pytest.raises(NoModelError):
            encoder.predict(["sunny", "85", "85", "FALSE"])

    def test_failed_winner_has_no_model(self, weather_dataset):
        winner = EvaluationResult("Tree (Error)", 0.0, 0.0)
        with pytest.raises(NoModelError):
            PredictionEncoder(weather_dataset, winner).predict(["sunny", "85", "85", "FALSE"])

    def test_label_from_trained_winner(self, weather_dataset):
        unit = PreprocessingPipeline(model=DecisionTreeModel(min_samples_leaf=1)).train(weather_dataset)
        winner = EvaluationResult("Tree", 100.0, 14.0, trained_unit=unit)
        encoder = PredictionEncoder(weather_dataset, winner)
        # every overcast day in the training data is a "yes"
        assert encoder.predict(["overcast", "83", "86", "FALSE"]) == "yes"
        assert encoder.predict(["sunny", "85", "85", "FALSE"]) in ("yes", "no")
