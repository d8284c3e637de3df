from django import forms

from .records import ContentType, Platform, PlannerItem


class PlannerItemForm(forms.Form):
    id = forms.IntegerField(required=False)
    client_id = forms.IntegerField()
    date = forms.DateField(widget=forms.DateInput(attrs={"class": "date-field", "placeholder": "Seleziona data"}))
    platform = forms.ChoiceField(choices=Platform.choices, required=False)
    type = forms.ChoiceField(choices=ContentType.choices, required=False)
    title = forms.CharField(max_length=200, required=False)
    caption = forms.CharField(widget=forms.Textarea, required=False, strip=False)
    status = forms.ChoiceField(choices=PlannerItem.Status.choices, required=False)

    def clean(self):
        cleaned = super().clean()
        cleaned["platform"] = cleaned.get("platform") or Platform.INSTAGRAM
        cleaned["type"] = cleaned.get("type") or ContentType.POST
        cleaned["status"] = cleaned.get("status") or PlannerItem.Status.PLANNED
        return cleaned


class PlannerStatusForm(forms.Form):
    id = forms.IntegerField()
    status = forms.ChoiceField(choices=PlannerItem.Status.choices)
