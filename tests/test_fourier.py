import numpy as np
import pytest

from simlab.fourier import box_lowpass, dft, dft_2d, idft, idft_2d, smooth_lowpass


def _plane(height=6, width=8):
    rng = np.random.default_rng(7)
    return rng.uniform(0.0, 255.0, size=(height, width))


def test_dft_of_impulse_is_flat():
    result = dft([1.0, 0.0, 0.0, 0.0])
    assert np.allclose(result, np.ones(4))


def test_dft_of_constant_concentrates_in_dc():
    result = dft([2.0, 2.0, 2.0, 2.0, 2.0])
    assert result[0] == pytest.approx(10.0)
    assert np.allclose(result[1:], 0.0)


def test_dft_agrees_with_numpy_fft():
    values = np.arange(7, dtype=float) ** 2
    assert np.allclose(dft(values), np.fft.fft(values))


def test_idft_inverts_dft():
    values = np.array([3.0, -1.0, 4.0, 1.0, -5.0, 9.0])
    assert np.allclose(idft(dft(values)), values)


def test_dft_rejects_two_dimensional_input():
    with pytest.raises(ValueError):
        dft([[1.0, 2.0], [3.0, 4.0]])


def test_dft_2d_agrees_with_numpy_fft2():
    plane = _plane(5, 4)
    assert np.allclose(dft_2d(plane), np.fft.fft2(plane))


def test_idft_2d_inverts_dft_2d():
    plane = _plane()
    assert np.allclose(idft_2d(dft_2d(plane)).real, plane)


def test_dft_2d_rejects_vector():
    with pytest.raises(ValueError):
        dft_2d([1.0, 2.0, 3.0])


def test_smooth_lowpass_with_wide_cutoff_keeps_plane():
    plane = _plane()
    assert np.allclose(smooth_lowpass(plane, 100), plane)


def test_smooth_lowpass_keeps_constant_plane():
    plane = np.full((8, 8), 42.0)
    assert np.allclose(smooth_lowpass(plane, 0), plane)


def test_smooth_lowpass_preserves_mean():
    plane = _plane()
    assert smooth_lowpass(plane, 1).mean() == pytest.approx(plane.mean())


def test_smooth_lowpass_reduces_variation():
    plane = _plane(16, 16)
    filtered = smooth_lowpass(plane, 1)
    assert filtered.std() < plane.std()


def test_box_lowpass_with_wide_cutoff_keeps_plane():
    plane = _plane()
    assert np.allclose(box_lowpass(plane, 10), plane)


def test_box_lowpass_zero_cutoff_leaves_mean():
    plane = _plane()
    assert np.allclose(box_lowpass(plane, 0), plane.mean())


def test_box_lowpass_negative_cutoff_removes_everything():
    plane = _plane()
    assert np.allclose(box_lowpass(plane, -1), 0.0)


def test_box_lowpass_rejects_vector():
    with pytest.raises(ValueError):
        box_lowpass([1.0, 2.0], 1)