"""
Column names and default settings for the smog-emissions experiment.
"""

from pathlib import Path

CSV_PATH = Path("data/vintage_cars_data.csv")
COST_PLOT_PATH = Path("data/cost_history.png")

DATA_COLUMNS = ["horsepower", "displacement", "weight"]
LABEL_COLUMN = "passedemissions"

SHUFFLE_PHRASE = "phrase"
TEST_SIZE = 50

LEARNING_RATE = 0.5
ITERATIONS = 100
BATCH_SIZE = 50
DECISION_BOUNDARY = 0.5
