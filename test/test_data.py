"""Tests for the dataset model, the ARFF loader and the validator."""

import numpy as np
import pytest

from classifierTournament.core.base import AttributeKind
from classifierTournament.core.exceptions import FormatError
from classifierTournament.data.dataset import MISSING, Attribute, Dataset, is_missing
from classifierTournament.data.loader import DataLoader

from conftest import IRIS_LABELS, write_arff


def small_dataset():
    schema = [
        Attribute("colour", AttributeKind.NOMINAL, ("red", "green")),
        Attribute("size", AttributeKind.NUMERIC),
        Attribute("label", AttributeKind.NOMINAL, ("a", "b")),
    ]
    return Dataset(schema, [[0, 1.5, 0], [1, 2.5, 1], [1, 3.5, 1]], relation="small")


class TestAttribute:
    def test_index_of_and_value_round_trip(self):
        attribute = Attribute("windy", AttributeKind.NOMINAL, ["TRUE", "FALSE"])
        assert attribute.domain == ("TRUE", "FALSE")
        assert attribute.index_of("FALSE") == 1
        assert attribute.value(attribute.index_of("TRUE")) == "TRUE"
        assert attribute.index_of("maybe") == -1

    def test_numeric_attribute_rejects_domain(self):
        with pytest.raises(ValueError):
            Attribute("x", AttributeKind.NUMERIC, ("a",))

    def test_nominal_attribute_needs_values(self):
        with pytest.raises(ValueError):
            Attribute("x", AttributeKind.NOMINAL)


class TestDataset:
    def test_class_is_last_attribute(self):
        dataset = small_dataset()
        assert dataset.class_index == 2
        assert dataset.class_attribute.name == "label"
        assert dataset.num_classes == 2

    def test_attributes_excluding_class(self):
        dataset = small_dataset()
        names = [attribute.name for attribute in dataset.attributes_excluding_class()]
        assert names == ["colour", "size"]
        assert len(names) == len(dataset.schema) - 1

    def test_rows_must_match_schema_width(self):
        schema = small_dataset().schema
        with pytest.raises(ValueError):
            Dataset(schema, [[0, 1.0]])

    def test_values_are_read_only(self):
        dataset = small_dataset()
        with pytest.raises(ValueError):
            dataset.values[0, 0] = 5

    def test_features_and_class_values(self):
        dataset = small_dataset()
        features = dataset.features()
        assert list(features.columns) == ["colour", "size"]
        assert features.shape == (3, 2)
        np.testing.assert_array_equal(dataset.class_values(), [0, 1, 1])

    def test_subset_keeps_schema(self):
        dataset = small_dataset()
        subset = dataset.subset([2, 0])
        assert subset.schema is dataset.schema
        assert len(subset) == 2
        np.testing.assert_array_equal(subset.values[:, 1], [3.5, 1.5])
        assert len(dataset) == 3

    def test_empty_dataset(self):
        dataset = Dataset(small_dataset().schema, [])
        assert dataset.is_empty
        assert dataset.values.shape == (0, 3)

    def test_missing_sentinel(self):
        assert is_missing(MISSING)
        assert not is_missing(0.0)
        assert not is_missing("?")


class TestDataLoader:
    def test_load_iris(self, iris_arff):
        dataset = DataLoader().load(iris_arff)
        assert len(dataset) == 150
        assert dataset.relation == "iris"
        assert dataset.class_attribute.name == "class"
        assert dataset.class_attribute.domain == IRIS_LABELS
        assert all(a.kind is AttributeKind.NUMERIC for a in dataset.attributes_excluding_class())
        np.testing.assert_array_equal(np.bincount(dataset.class_values()), [50, 50, 50])

    def test_nominal_values_become_domain_indices(self, weather_dataset):
        outlook = weather_dataset.schema[0]
        assert outlook.is_nominal
        assert outlook.domain == ("sunny", "overcast", "rainy")
        # first row: sunny,85,85,FALSE,no
        np.testing.assert_array_equal(weather_dataset.values[0], [0, 85, 85, 1, 1])

    def test_zero_attributes_is_format_error(self, zero_attribute_arff):
        with pytest.raises(FormatError):
            DataLoader().load(zero_attribute_arff)

    def test_unparseable_file_is_format_error(self, tmp_path):
        path = tmp_path / "notes.arff"
        path.write_text("this is not a dataset\njust text\n", encoding="utf-8")
        with pytest.raises(FormatError):
            DataLoader().load(path)

    def test_undeclared_nominal_value_is_format_error(self, tmp_path):
        path = write_arff(tmp_path / "bad.arff", "bad",
                          [("x", "numeric"), ("label", "{a,b}")],
                          ["1,a", "2,c"])
        with pytest.raises(FormatError):
            DataLoader().load(path)

    def test_non_numeric_value_is_format_error(self, tmp_path):
        path = write_arff(tmp_path / "bad.arff", "bad",
                          [("x", "numeric"), ("label", "{a,b}")],
                          ["1,a", "two,b"])
        with pytest.raises(FormatError):
            DataLoader().load(path)

    def test_missing_value_is_format_error(self, tmp_path):
        path = write_arff(tmp_path / "gaps.arff", "gaps",
                          [("x", "numeric"), ("label", "{a,b}")],
                          ["1,a", "?,b"])
        with pytest.raises(FormatError, match="missing"):
            DataLoader().load(path)

    def test_numeric_class_is_format_error(self, tmp_path):
        path = write_arff(tmp_path / "regression.arff", "regression",
                          [("x", "numeric"), ("y", "numeric")],
                          ["1,2", "2,4"])
        with pytest.raises(FormatError, match="nominal"):
            DataLoader().load(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DataLoader().load(tmp_path / "absent.arff")

    def test_header_without_rows_loads_empty(self, header_only_arff):
        dataset = DataLoader().load(header_only_arff)
        assert dataset.is_empty
        assert dataset.class_attribute.name == "label"
