import numpy as np
import pytest


@pytest.fixture
def separable_data():
    """Four rows, class decided by the sign of the first feature."""
    features = np.array(
        [
            [-2.0, 0.5],
            [-1.0, -0.5],
            [1.0, -0.5],
            [2.0, 0.5],
        ]
    )
    labels = np.array([[0.0], [0.0], [1.0], [1.0]])
    return features, labels


@pytest.fixture
def cars_csv(tmp_path):
    rng = np.random.default_rng(7)
    rows = ["mpg,cylinders,displacement,horsepower,weight,passedemissions"]
    for i in range(120):
        horsepower = rng.uniform(50, 230)
        displacement = horsepower * 2 + rng.normal(0, 20)
        weight = horsepower * 15 + rng.normal(0, 300)
        passed = "TRUE" if horsepower < 120 else "FALSE"
        rows.append(
            f"{rng.uniform(10, 40):.1f},4,{displacement:.1f},{horsepower:.1f},{weight:.1f},{passed}"
        )
    path = tmp_path / "vintage_cars_data.csv"
    path.write_text("\n".join(rows) + "\n")
    return path
