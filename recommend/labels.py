# recommend/labels.py
from .exceptions import DecodingError

# Output encoding of the remote model: index -> crop name.
CROP_LABELS = (
    'rice', 'maize', 'chickpea', 'kidneybeans', 'pigeonpeas',
    'mothbeans', 'mungbean', 'blackgram', 'lentil', 'pomegranate',
    'banana', 'mango', 'grapes', 'watermelon', 'muskmelon',
    'apple', 'orange', 'papaya', 'coconut', 'cotton',
    'jute', 'coffee',
)


def label_for(index):
    """
    Map a prediction index to its crop name, rejecting anything out of range.
    Whole-number floats (`3.0`) count as indices; bools and fractions do not.
    """
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if isinstance(index, bool) or not isinstance(index, int):
        raise DecodingError(f"Invalid prediction index: {index!r}")
    if not 0 <= index < len(CROP_LABELS):
        raise DecodingError(f"Invalid prediction index: {index}")
    return CROP_LABELS[index]
