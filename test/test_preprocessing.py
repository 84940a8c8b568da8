"""Tests for the transforms and the preprocessing pipeline."""

import numpy as np
import pandas as pd
import pytest

from classifierTournament.core.base import AttributeKind, TransformKind
from classifierTournament.data.dataset import MISSING, Attribute
from classifierTournament.models import KNNClassifier, NaiveBayesClassifier
from classifierTournament.preprocessing import (
    Discretizer, NominalToBinary, Normalizer, PreprocessingPipeline, order_steps
)

SIZE = Attribute("size", AttributeKind.NUMERIC)
COLOUR = Attribute("colour", AttributeKind.NOMINAL, ("red", "green", "blue"))


def frame(**columns):
    return pd.DataFrame({name: np.asarray(values, dtype=float) for name, values in columns.items()})


class TestNormalizer:
    def test_rescales_with_training_range(self):
        normalizer = Normalizer().fit(frame(size=[0, 5, 10]), [SIZE])
        out = normalizer.transform(frame(size=[0, 2.5, 10, 15, -5]))
        np.testing.assert_allclose(out["size"], [0, 0.25, 1, 1.5, -0.5])

    def test_constant_attribute_maps_to_zero(self):
        normalizer = Normalizer().fit(frame(size=[3, 3, 3]), [SIZE])
        np.testing.assert_array_equal(normalizer.transform(frame(size=[3, 7]))["size"], [0, 0])

    def test_nominal_columns_untouched(self):
        normalizer = Normalizer().fit(frame(colour=[0, 2, 1], size=[1, 2, 3]), [COLOUR, SIZE])
        out = normalizer.transform(frame(colour=[2, 1], size=[1, 3]))
        np.testing.assert_array_equal(out["colour"], [2, 1])
        np.testing.assert_array_equal(out["size"], [0, 1])

    def test_transform_before_fit(self):
        with pytest.raises(ValueError):
            Normalizer().transform(frame(size=[1]))


class TestDiscretizer:
    def test_equal_width_cut_points(self):
        discretizer = Discretizer(bins=5).fit(frame(size=[0, 10]), [SIZE])
        np.testing.assert_allclose(discretizer.cut_points_["size"], [2, 4, 6, 8])

    def test_upper_bounds_are_inclusive(self):
        discretizer = Discretizer(bins=5).fit(frame(size=[0, 10]), [SIZE])
        out = discretizer.transform(frame(size=[-3, 0, 2, 2.01, 9.9, 10, 42]))
        np.testing.assert_array_equal(out["size"], [0, 0, 0, 1, 4, 4, 4])

    def test_output_attribute_is_nominal(self):
        discretizer = Discretizer(bins=3).fit(frame(size=[0, 3]), [SIZE])
        (attribute,) = discretizer.output_attributes_
        assert attribute.kind is AttributeKind.NOMINAL
        assert attribute.domain == ("(-inf-1]", "(1-2]", "(2-inf)")

    def test_constant_attribute_single_bin(self):
        discretizer = Discretizer().fit(frame(size=[4, 4, 4]), [SIZE])
        assert discretizer.output_attributes_[0].domain == ("'All'",)
        np.testing.assert_array_equal(discretizer.transform(frame(size=[1, 4, 9]))["size"], [0, 0, 0])

    def test_equal_frequency_strategy(self):
        values = [1, 2, 3, 4, 5, 6, 7, 8]
        discretizer = Discretizer(bins=2, strategy="quantile").fit(frame(size=values), [SIZE])
        np.testing.assert_allclose(discretizer.cut_points_["size"], [4.5])

    def test_rejects_unknown_strategy(self):
        with pytest.raises(ValueError):
            Discretizer(strategy="kmeans")

    def test_nominal_attribute_passes_through(self):
        discretizer = Discretizer().fit(frame(colour=[0, 1, 2]), [COLOUR])
        assert discretizer.output_attributes_ == (COLOUR,)


class TestNominalToBinary:
    def test_one_indicator_per_value(self):
        transform = NominalToBinary().fit(frame(colour=[0, 1], size=[5, 6]), [COLOUR, SIZE])
        names = [a.name for a in transform.output_attributes_]
        assert names == ["colour=red", "colour=green", "colour=blue", "size"]
        assert all(a.is_numeric for a in transform.output_attributes_)

        out = transform.transform(frame(colour=[2, 0], size=[7, 8]))
        assert list(out.columns) == names
        np.testing.assert_array_equal(out.to_numpy(), [[0, 0, 1, 7], [1, 0, 0, 8]])

    def test_colliding_indicator_names_stay_distinct(self):
        first = Attribute("a", AttributeKind.NOMINAL, ("b=c", "d"))
        second = Attribute("a=b", AttributeKind.NOMINAL, ("c", "e"))
        clash = Attribute("a=d", AttributeKind.NUMERIC)
        data = frame(**{"a": [0, 1], "a=b": [0, 1], "a=d": [4.0, 5.0]})
        transform = NominalToBinary().fit(data, [first, second, clash])

        names = [a.name for a in transform.output_attributes_]
        assert names == ["a=b=c", "a=d", "a=b=c_2", "a=b=e", "a=d_2"]
        out = transform.transform(data)
        assert list(out.columns) == names
        np.testing.assert_array_equal(out.to_numpy(), [[1, 0, 1, 0, 4], [0, 1, 0, 1, 5]])


class TestOrderSteps:
    def test_nominal_to_binary_runs_before_normalize(self):
        steps = order_steps([TransformKind.NORMALIZE, TransformKind.NOMINAL_TO_BINARY])
        assert steps == (TransformKind.NOMINAL_TO_BINARY, TransformKind.NORMALIZE)

    def test_rejects_duplicates(self):
        with pytest.raises(ValueError):
            order_steps([TransformKind.NORMALIZE, TransformKind.NORMALIZE])

    def test_rejects_more_than_two(self):
        with pytest.raises(ValueError):
            order_steps(list(TransformKind))


class TestPreprocessingPipeline:
    def test_transforms_fit_on_training_data_only(self, weather_dataset):
        training = weather_dataset.subset(range(7))
        pipeline = PreprocessingPipeline(
            model=KNNClassifier(n_neighbors=1),
            steps=(TransformKind.NORMALIZE, TransformKind.NOMINAL_TO_BINARY),
        ).train(training)

        first, second = pipeline.transforms_
        assert isinstance(first, NominalToBinary)
        assert isinstance(second, Normalizer)
        temperatures = training.features()["temperature"]
        assert second.minimums_["temperature"] == temperatures.min()
        assert second.maximums_["temperature"] == temperatures.max()
        # Normalize also sees the indicator columns
        assert "outlook=sunny" in second.minimums_

    def test_classify_training_row_with_nearest_neighbour(self, weather_dataset):
        pipeline = PreprocessingPipeline(
            model=KNNClassifier(n_neighbors=1),
            steps=(TransformKind.NOMINAL_TO_BINARY, TransformKind.NORMALIZE),
        ).train(weather_dataset)
        for row, label in zip(weather_dataset.values, weather_dataset.class_values()):
            assert pipeline.classify(row) == label

    def test_classify_accepts_missing_class_slot(self, weather_dataset):
        pipeline = PreprocessingPipeline(
            model=NaiveBayesClassifier(), steps=(TransformKind.DISCRETIZE,)
        ).train(weather_dataset)
        instance = list(weather_dataset.values[0][:-1]) + [MISSING]
        assert pipeline.classify(instance) in (0, 1)
        assert pipeline.classify_dataset(weather_dataset).shape == (14,)

    def test_classify_rejects_wrong_width(self, weather_dataset):
        pipeline = PreprocessingPipeline(model=KNNClassifier()).train(weather_dataset)
        with pytest.raises(ValueError):
            pipeline.classify([1.0, 2.0])

    def test_untrained_pipeline_cannot_classify(self, weather_dataset):
        pipeline = PreprocessingPipeline(model=KNNClassifier())
        with pytest.raises(ValueError):
            pipeline.classify_dataset(weather_dataset)

    def test_train_does_not_mutate_template_model(self, weather_dataset):
        model = KNNClassifier(n_neighbors=3)
        PreprocessingPipeline(model=model).train(weather_dataset)
        assert not hasattr(model, "classes_")

    def test_describe(self):
        pipeline = PreprocessingPipeline(
            model=KNNClassifier(),
            steps=(TransformKind.NORMALIZE, TransformKind.NOMINAL_TO_BINARY),
        )
        assert pipeline.describe() == "nominal_to_binary -> normalize -> KNNClassifier"
