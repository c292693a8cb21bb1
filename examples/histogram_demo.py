"""HistogramWidget demo.

Run:
    python examples/histogram_demo.py
"""

import numpy as np
import pandas as pd
from nicegui import ui

from nicehist import HistogramState, HistogramWidget
from nicehist.stats import summary_table
from nicehist.utils.logging import configure_logging, get_logger

configure_logging(level="DEBUG")
logger = get_logger(__name__)

rng = np.random.default_rng(0)
df = pd.DataFrame({
    "latency_ms": np.concatenate([rng.normal(120, 25, 900), rng.normal(260, 40, 100)]),
})
# A few junk rows the widget is expected to drop.
df.loc[len(df)] = [np.nan]
df.loc[len(df)] = [np.inf]


def on_change(state: HistogramState) -> None:
    logger.info(f"state changed: {state.to_dict()}")


with ui.header().classes("py-2 px-4"):
    ui.label("nicehist demo")

widget = HistogramWidget(
    on_change=on_change,
    state=HistogramState(show_normal_curve=True, show_mean=True, show_median=True),
    column_name="latency_ms",
)
widget.render()
widget.set_data(df["latency_ms"])

print(summary_table(widget.stats).T.to_string())

ui.run()
