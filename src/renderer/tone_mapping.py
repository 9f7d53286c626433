# renderer/tone_mapping.py
import numpy as np

def gamma_correct(image: np.ndarray) -> np.ndarray:
    """
    Encode an averaged linear radiance image as 8-bit RGB with gamma 2
    (square root), clamping to [0, 1] first.
    """
    encoded = np.sqrt(np.clip(image, 0.0, 1.0))
    return (encoded * 255.999).astype(np.uint8)

def reinhard_tone_mapping(image: np.ndarray, exposure=1.0, white_point=1.0, gamma=2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.

    Useful for scenes with bright emitters, where plain clamping blows out
    everything near a light.
    """
    scaled = np.clip(image, 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return (mapped * 255).clip(0, 255).astype(np.uint8)

TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
}
