"""
Visualization View
==================
Composes the renderers into one HTML page for a session snapshot.

Everything here is a pure function of the snapshot: a new classification
result re-renders the whole page, nothing derived is cached between calls.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from audio_cnn_viz import config
from audio_cnn_viz.engine.feature_map import render_feature_map
from audio_cnn_viz.engine.layers import child_label, split_layers
from audio_cnn_viz.engine.legend import render_color_scale
from audio_cnn_viz.engine.svg import escape
from audio_cnn_viz.engine.waveform import render_waveform
from audio_cnn_viz.labels import get_emoji_for_class
from audio_cnn_viz.schemas import ApiResponse, Prediction
from audio_cnn_viz.session import RequestState, SessionSnapshot


logger = logging.getLogger("audio_cnn_viz.view")

PAGE_TITLE = "From Data to Discovery"
PAGE_INTRO = (
    "Visualize predictions, spectrograms, and waveforms with clarity. "
    "Turn raw numbers into knowledge you can see and explore."
)

_STYLE = """
body{margin:0;min-height:100vh;background:linear-gradient(#111827,#030712 60%,#000);
color:#f3f4f6;font-family:system-ui,sans-serif}
main{margin:0 auto;padding:2rem;max-width:100%}
header{text-align:center;margin-bottom:3rem}
h1{font-weight:300;font-size:2.25rem;letter-spacing:.05em}
header p{color:#9ca3af}
.card{background:#111827;border:1px solid #1f2937;border-radius:.75rem;padding:1.5rem;margin-bottom:2rem}
.card h3{margin-top:0}
.error{border-color:#ef4444;background:rgba(127,29,29,.4);color:#f87171}
.badge{display:inline-block;margin-top:1rem;padding:.2rem .6rem;border-radius:.5rem;
background:#374151;border:1px solid #4b5563;font-size:.8rem}
.badge.top{background:#4f46e5;border-color:#4f46e5;color:#fff}
.bar{height:.5rem;background:#1f2937;border-radius:.25rem;overflow:hidden}
.bar>div{height:100%;background:#6366f1}
.prediction{margin-bottom:.75rem}
.prediction-head{display:flex;justify-content:space-between;align-items:center;margin-bottom:.4rem}
.inputs{display:grid;grid-template-columns:repeat(auto-fit,minmax(28rem,1fr));gap:1.5rem}
.layers{display:grid;gap:1.5rem}
.internals{height:20rem;overflow-y:auto;border:1px solid #374151;border-radius:.25rem;
background:rgba(31,41,55,.6);padding:.5rem;margin-top:1rem}
figure{margin:0 0 .5rem;text-align:center}
figure svg{margin:0 auto;border-radius:1rem;border:1px solid #d6d3d1}
.fm-title{margin:.75rem 0 0;font-size:1rem;color:#d6d3d1}
.fm-subtitle{margin:.25rem 0 0;font-size:.8rem;color:#78716c;font-style:italic}
.legend-row{display:flex;justify-content:flex-end;margin-top:1.25rem}
.color-scale{display:flex;align-items:center;gap:.75rem}
.cs-label{font-size:.75rem;color:#78716c}
.cs-bar{border-radius:1rem;border:1px solid #a8a29e}
"""

_SUBMIT_SCRIPT = """
document.getElementById('upload').addEventListener('change', function () {
  // the entry list is built synchronously, so disabling afterwards is safe
  this.form.submit();
  this.disabled = true;
  document.getElementById('upload-label').textContent = 'Loading...';
});
"""


@dataclass(frozen=True)
class PredictionBar:
    """One row of the ranked prediction list."""
    rank: int
    label: str
    emoji: str
    percent: float

    @property
    def is_top(self) -> bool:
        return self.rank == 1

    @property
    def percent_label(self) -> str:
        return f"{self.percent:.1f}%"


class VisualizationView:
    """Builds the result page from the current aggregate root."""

    def __init__(
        self,
        top_k: int = config.TOP_K_PREDICTIONS,
        grid_columns: int = config.LAYER_GRID_COLUMNS,
    ) -> None:
        self.top_k = top_k
        self.grid_columns = grid_columns
        self.legend = render_color_scale()

    # ------------------------------------------------------------------
    # Predictions
    # ------------------------------------------------------------------
    def rank_predictions(self, predictions: Sequence[Prediction]) -> list[PredictionBar]:
        return [
            PredictionBar(
                rank=i + 1,
                label=pred.display_name,
                emoji=get_emoji_for_class(pred.class_name),
                percent=pred.percent,
            )
            for i, pred in enumerate(predictions[: self.top_k])
        ]

    def render_predictions(self, predictions: Sequence[Prediction]) -> str:
        rows = []
        for bar in self.rank_predictions(predictions):
            badge_cls = "badge top" if bar.is_top else "badge"
            rows.append(
                '<div class="prediction">'
                '<div class="prediction-head">'
                f"<div>{bar.emoji} <span>{escape(bar.label)}</span></div>"
                f'<span class="{badge_cls}">{bar.percent_label}</span>'
                "</div>"
                f'<div class="bar"><div style="width:{bar.percent:.1f}%"></div></div>'
                "</div>"
            )
        return _card("Top Predictions", "".join(rows))

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def render_inputs(self, response: ApiResponse) -> str:
        spectrogram = render_feature_map(response.input_spectogram, is_spectrogram=True)
        waveform = render_waveform(response.waveform.values, title=response.waveform.title)

        spectrogram_card = _card(
            "Input Spectrogram",
            spectrogram.to_html() + self._legend_row(),
        )
        waveform_card = _card("Audio Waveform", waveform.to_html())
        return f'<div class="inputs">{spectrogram_card}{waveform_card}</div>'

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------
    def render_layers(self, response: ApiResponse) -> str:
        partition = split_layers(response.visualizations)
        columns = []

        for main_name, main_data in partition.main:
            main_map = render_feature_map(main_data)
            column = [
                f"<h4>{escape(main_name)}</h4>",
                main_map.to_html(),
            ]

            internals = partition.sorted_internals(main_name)
            if internals:
                maps = [
                    render_feature_map(
                        layer_data,
                        title=child_label(layer_name, main_name),
                        compact=True,
                    ).to_html(subtitle="")
                    for layer_name, layer_data in internals
                ]
                column.append(f'<div class="internals">{"".join(maps)}</div>')

            columns.append(f'<div class="layer-column">{"".join(column)}</div>')

        logger.debug(
            "Rendered %d main layers (%d with internals)",
            len(partition.main),
            sum(1 for name, _ in partition.main if name in partition.internals),
        )
        grid = (
            f'<div class="layers" style="grid-template-columns:'
            f'repeat({self.grid_columns},minmax(0,1fr))">{"".join(columns)}</div>'
        )
        return _card("Convolutional Layer Outputs", grid + self._legend_row())

    def render_result(self, response: ApiResponse) -> str:
        return (
            '<section class="results">'
            + self.render_predictions(response.predictions)
            + self.render_inputs(response)
            + self.render_layers(response)
            + "</section>"
        )

    # ------------------------------------------------------------------
    # Page
    # ------------------------------------------------------------------
    def render_page(self, snapshot: SessionSnapshot, action: str = "/visualize") -> str:
        """Full HTML document; a failed snapshot shows only the error."""
        pending = snapshot.state is RequestState.PENDING
        parts = [self._header(snapshot, action, pending)]

        if snapshot.state is RequestState.FAILED:
            parts.append(
                f'<div class="card error"><p>Error: {escape(snapshot.error or "")}</p></div>'
            )
        elif snapshot.state is RequestState.RESOLVED and snapshot.result is not None:
            parts.append(self.render_result(snapshot.result))

        return (
            "<!DOCTYPE html>"
            '<html lang="en"><head><meta charset="utf-8">'
            '<meta name="viewport" content="width=device-width, initial-scale=1">'
            f"<title>{escape(PAGE_TITLE)}</title><style>{_STYLE}</style></head>"
            f"<body><main>{''.join(parts)}</main>"
            f"<script>{_SUBMIT_SCRIPT}</script></body></html>"
        )

    def _header(self, snapshot: SessionSnapshot, action: str, pending: bool) -> str:
        accept = ",".join(config.ACCEPTED_EXTENSIONS)
        disabled = " disabled" if pending else ""
        label = "Loading..." if pending else "Choose a WAV file"
        badge = (
            f'<div><span class="badge">{escape(snapshot.file_name)}</span></div>'
            if snapshot.file_name
            else ""
        )
        return (
            "<header>"
            f"<h1>{escape(PAGE_TITLE)}</h1><p>{escape(PAGE_INTRO)}</p>"
            f'<form method="post" action="{escape(action)}" enctype="multipart/form-data">'
            f'<label><span id="upload-label" class="badge top">{label}</span>'
            f'<input id="upload" type="file" name="audio" accept="{accept}" hidden{disabled}>'
            "</label></form>"
            f"{badge}"
            "</header>"
        )

    def _legend_row(self) -> str:
        return f'<div class="legend-row">{self.legend.to_html()}</div>'


def _card(title: str, body: str) -> str:
    return f'<div class="card"><h3>{escape(title)}</h3>{body}</div>'
