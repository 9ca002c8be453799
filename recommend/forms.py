# recommend/forms.py
from django import forms

# Order of the request features; the prediction service depends on it.
FEATURE_ORDER = ['N', 'P', 'K', 'temperature', 'humidity', 'pH', 'rainfall']

REQUIRED_MESSAGE = 'This field is required.'


def number_field(label, placeholder, step, **bounds):
    return forms.FloatField(
        label=label,
        error_messages={'required': REQUIRED_MESSAGE, 'invalid': REQUIRED_MESSAGE},
        widget=forms.NumberInput(attrs={'placeholder': placeholder, 'step': step}),
        **bounds
    )


class InputForm(forms.Form):
    N = number_field('Nitrogen (N) content', '50', '0.01', min_value=0)
    P = number_field('Phosphorous (P) content', '50', '0.01', min_value=0)
    K = number_field('Potassium (K) content', '50', '0.01', min_value=0)
    temperature = number_field('Temperature (°C)', '25', '0.1')
    humidity = number_field('Humidity (%)', '70', '0.1', min_value=0, max_value=100)
    pH = number_field('pH value', '6.5', '0.1', min_value=0, max_value=14)
    rainfall = number_field('Rainfall (mm)', '200', '0.1', min_value=0)

    def feature_vector(self):
        """
        Cleaned values in FEATURE_ORDER. Whole numbers come back as ints so
        they serialize as `50` rather than `50.0`.
        """
        values = []
        for key in FEATURE_ORDER:
            value = self.cleaned_data[key]
            values.append(int(value) if value.is_integer() else value)
        return values
