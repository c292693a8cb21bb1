"""Unit tests for the normal overlay curve."""

from __future__ import annotations

import math

import pytest

from nicehist.stats.binning import BinConfig, generate_bins
from nicehist.stats.normal_curve import generate_normal_curve, histogram_area, normal_pdf
from nicehist.stats.statistics import compute_statistics


def test_normal_pdf_standard_peak():
    assert normal_pdf(0.0, 0.0, 1.0) == pytest.approx(1 / math.sqrt(2 * math.pi))
    assert normal_pdf(1.0, 0.0, 1.0) == pytest.approx(math.exp(-0.5) / math.sqrt(2 * math.pi))


def test_normal_pdf_zero_std_is_zero():
    assert normal_pdf(3.0, 3.0, 0.0) == 0.0


def test_curve_empty_for_missing_inputs(stepped_data):
    stats = compute_statistics(stepped_data)
    bins = generate_bins(stepped_data)
    assert generate_normal_curve(None, bins) == []
    assert generate_normal_curve(stats, []) == []
    assert generate_normal_curve(stats, None) == []


def test_curve_empty_for_flat_dataset(flat_data):
    stats = compute_statistics(flat_data)
    bins = generate_bins(flat_data)
    assert bins[0].count == 3
    assert generate_normal_curve(stats, bins) == []


def test_curve_length_and_padded_range():
    data = [1, 2, 3, 4, 5]
    stats = compute_statistics(data)
    bins = generate_bins(data)
    points = generate_normal_curve(stats, bins)
    assert len(points) == 101
    assert points[0].x == pytest.approx(1 - 0.2)
    assert points[-1].x == pytest.approx(5 + 0.2)
    assert all(a.x < b.x for a, b in zip(points, points[1:]))
    assert len(generate_normal_curve(stats, bins, num_points=10)) == 11


def test_curve_is_scaled_by_histogram_area():
    data = [1, 2, 3, 4, 5]
    stats = compute_statistics(data)
    bins = generate_bins(data)
    points = generate_normal_curve(stats, bins)
    peak = max(range(len(points)), key=lambda i: points[i].y)
    assert peak == 50
    area = histogram_area(bins)
    assert area == pytest.approx(5 * 4 / len(bins))
    assert points[peak].y == pytest.approx(normal_pdf(points[peak].x, stats.mean, stats.std_dev) * area)


def test_histogram_area_flat(flat_data):
    assert histogram_area(generate_bins(flat_data, BinConfig())) == 3.0
