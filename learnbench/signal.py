"""Baseband test-signal helpers: tone generation and int16 IQ conversion."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence
from dataclasses import dataclass

INT16_MIN = -32768
INT16_MAX = 32767


@dataclass
class StreamArgs:
    """Streaming parameters for one radio channel."""

    bandwidth: int = 0
    fs: int = 0
    freq: int = 0
    portname: str = ""
    buffer_size: int = 0


def _mhz(value: float) -> int:
    return int(value * 1_000_000.0 + 0.5)


def _to_int16(value: float) -> int:
    truncated = int(value)
    return (truncated - INT16_MIN) % 65536 + INT16_MIN


def angle_to_rad(a: float) -> float:
    """Convert degrees to radians."""
    return a * math.pi / 180.0


def rad_to_angle(r: float) -> float:
    """Convert radians to degrees."""
    return r * 180.0 / math.pi


def generate_signal_f(
    sample_fs: float = 2048e3,
    sample_point_size: int = 4096,
    delta_f: float = 1,
    times: float = 1.0,
) -> list[complex]:
    """Return a unit-amplitude complex tone of ``delta_f`` resolution bins, scaled by ``1/times``."""
    if sample_point_size < 0:
        raise ValueError("sample_point_size must not be negative")
    if sample_fs == 0:
        raise ValueError("sample_fs must not be zero")
    sample_step = (1 / sample_fs) * (sample_fs / sample_point_size) if sample_point_size else 0.0
    delta_f /= times
    return [
        cmath.exp(1j * 2 * math.pi * sample_step * k * delta_f)
        for k in range(sample_point_size)
    ]


def complex_f_to_i(f_data: Sequence[complex], ampl: float = 1024) -> list[complex]:
    """Scale float samples to int16 IQ values; peaks below 1.0 use the full ``ampl``."""
    max_value = max([1.0, *(max(z.real, z.imag) for z in f_data)])
    return [
        complex(
            _to_int16(z.real * ampl / max_value),
            _to_int16(z.imag * ampl / max_value),
        )
        for z in f_data
    ]


def generate_signal_i(
    sample_fs: float = 2048e3,
    sample_point_size: int = 4096,
    delta_f: int = 1,
    times: float = 1.0,
) -> list[complex]:
    """Generate a tone and convert it to int16 IQ values with amplitude 2048."""
    samples = generate_signal_f(sample_fs, sample_point_size, int(delta_f), times)
    return complex_f_to_i(samples, 2048)


def complex_i_to_f(i_data: Sequence[complex]) -> list[complex]:
    """Normalise int16 IQ values by their largest positive component."""
    max_value = max([0.0, *(max(z.real, z.imag) for z in i_data)])
    if i_data and max_value == 0:
        raise ValueError("samples have no positive component to normalise by")
    return [complex(z.real / max_value, z.imag / max_value) for z in i_data]


def compose_signal(
    sample_data: Sequence[complex],
    sample_fs: int,
    tx_fs: int,
    delta_f_list: Sequence[float],
) -> list[complex]:
    """Upsample ``sample_data`` and mix it onto every offset in ``delta_f_list`` (MHz).

    Fewer than two offsets leave the data unchanged.
    """
    if len(delta_f_list) <= 1:
        return list(sample_data)
    sample_size = len(sample_data)
    if sample_fs <= 0 or sample_size == 0:
        raise ValueError("sample_fs and sample_data must be non-empty and positive")
    fs_times = tx_fs // sample_fs
    conversion_fs = float(sample_fs * fs_times)
    conversion_size = sample_size * fs_times
    conversion_resolution = float(sample_fs // sample_size)
    if conversion_fs == 0 or conversion_resolution == 0:
        raise ValueError("sample rates give a zero conversion rate or resolution")
    conversion_per = tx_fs / conversion_fs

    sample_f = complex_i_to_f(sample_data)
    result = [0j] * conversion_size
    for delta in delta_f_list:
        tone = generate_signal_f(
            conversion_fs,
            conversion_size,
            _mhz(delta) / conversion_resolution,
            conversion_per,
        )
        result = [acc + t * sample_f[i // fs_times] for i, (acc, t) in enumerate(zip(result, tone))]

    count = len(delta_f_list)
    return complex_f_to_i([value / count for value in result], 2048)