import numpy as np
import pytest

from smog_check.data_prep import load_csv, passed_emissions, shuffle_rows, split_test


def test_passed_emissions_converter():
    assert passed_emissions("TRUE") == 1
    assert passed_emissions("FALSE") == 0
    assert passed_emissions("true") == 0


def test_load_csv_extracts_requested_columns(tmp_path):
    path = tmp_path / "cars.csv"
    path.write_text(
        "mpg,horsepower,weight,passedemissions\n"
        "18,130,3504,FALSE\n"
        "26,95,2372,TRUE\n"
        "\n"
    )

    features, labels = load_csv(
        path,
        data_columns=["weight", "horsepower"],
        label_columns=["passedemissions"],
        converters={"passedemissions": passed_emissions},
    )

    np.testing.assert_array_equal(features, [[3504.0, 130.0], [2372.0, 95.0]])
    np.testing.assert_array_equal(labels, [[0.0], [1.0]])
    assert features.dtype == float


def test_load_csv_missing_column(tmp_path):
    path = tmp_path / "cars.csv"
    path.write_text("horsepower,passedemissions\n130,TRUE\n")

    with pytest.raises(ValueError, match="weight"):
        load_csv(path, ["horsepower", "weight"], ["passedemissions"])


def test_load_csv_rejects_text_in_numeric_columns(tmp_path):
    path = tmp_path / "cars.csv"
    path.write_text("horsepower,passedemissions\n?,1\n130,0\n")

    with pytest.raises(ValueError):
        load_csv(path, ["horsepower"], ["passedemissions"])


def test_shuffle_is_deterministic_and_aligned():
    features = np.arange(20, dtype=float).reshape(10, 2)
    labels = features[:, :1] * 10

    f1, l1 = shuffle_rows(features, labels, "phrase")
    f2, l2 = shuffle_rows(features, labels, "phrase")

    np.testing.assert_array_equal(f1, f2)
    np.testing.assert_array_equal(l1, l2)
    np.testing.assert_array_equal(l1, f1[:, :1] * 10)
    assert sorted(f1[:, 0]) == sorted(features[:, 0])


def test_shuffle_depends_on_phrase():
    features = np.arange(50, dtype=float).reshape(50, 1)

    f1, _ = shuffle_rows(features, features, "phrase")
    f2, _ = shuffle_rows(features, features, "another phrase")

    assert not np.array_equal(f1, f2)


def test_split_takes_leading_rows_for_test():
    features = np.arange(10, dtype=float).reshape(5, 2)
    labels = np.arange(5, dtype=float).reshape(5, 1)

    X_train, y_train, X_test, y_test = split_test(features, labels, 2)

    np.testing.assert_array_equal(X_test, features[:2])
    np.testing.assert_array_equal(y_test, labels[:2])
    np.testing.assert_array_equal(X_train, features[2:])
    np.testing.assert_array_equal(y_train, labels[2:])


def test_split_defaults_to_half():
    features = np.zeros((7, 1))
    labels = np.zeros((7, 1))

    X_train, _, X_test, _ = split_test(features, labels)

    assert len(X_test) == 3
    assert len(X_train) == 4


@pytest.mark.parametrize("test_size", [-1, 6])
def test_split_rejects_out_of_range(test_size):
    with pytest.raises(ValueError):
        split_test(np.zeros((5, 1)), np.zeros((5, 1)), test_size)
