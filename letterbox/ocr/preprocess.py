import numpy as np
from PIL import Image, ImageOps


def _otsu_threshold(gray_np: np.ndarray) -> int:
    hist, _ = np.histogram(gray_np.flatten(), bins=256, range=(0, 256))
    total = gray_np.size
    sum_total = np.dot(np.arange(256), hist)
    sum_b = 0.0
    w_b = 0.0
    max_var = 0.0
    threshold = 127
    for t in range(256):
        w_b += hist[t]
        if w_b == 0:
            continue
        w_f = total - w_b
        if w_f == 0:
            break
        sum_b += t * hist[t]
        m_b = sum_b / w_b
        m_f = (sum_total - sum_b) / w_f
        var_between = w_b * w_f * (m_b - m_f) ** 2
        if var_between > max_var:
            max_var = var_between
            threshold = t
    return threshold


def preprocess_for_ocr(im: Image.Image) -> Image.Image:
    """Autocontrast + Otsu binarization. Never resizes: box origins must stay in source pixels."""
    im = ImageOps.autocontrast(im.convert("RGB"), cutoff=1)
    g = np.asarray(im.convert("L"), dtype=np.uint8)
    t = _otsu_threshold(g)
    bw = (g > t).astype(np.uint8) * 255
    return Image.fromarray(bw)
