from decimal import Decimal

from django import forms

from .records import Projection


class ProjectionForm(forms.Form):
    start_date = forms.DateField(widget=forms.DateInput(attrs={"class": "date-field", "placeholder": "Inizio"}))
    end_date = forms.DateField(widget=forms.DateInput(attrs={"class": "date-field", "placeholder": "Fine"}))
    type = forms.ChoiceField(choices=Projection.Type.choices, required=False)
    revenue_target = forms.DecimalField(min_value=Decimal("0"), max_digits=14, decimal_places=2, required=False)
    client_target = forms.IntegerField(min_value=0, required=False)
    note = forms.CharField(widget=forms.Textarea, required=False, strip=False)

    def clean(self):
        cleaned = super().clean()
        start = cleaned.get("start_date")
        end = cleaned.get("end_date")
        if start and end and start > end:
            self.add_error("end_date", "La data di fine non puo precedere quella di inizio.")
        cleaned["type"] = cleaned.get("type") or Projection.Type.MONTHLY
        return cleaned
