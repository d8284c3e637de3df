from django import forms


class EffortLogForm(forms.Form):
    client_id = forms.IntegerField()
    date = forms.DateField(widget=forms.DateInput(attrs={"class": "date-field", "placeholder": "Seleziona data"}))
    posts = forms.IntegerField(min_value=0, required=False)
    reels = forms.IntegerField(min_value=0, required=False)
    minutes = forms.IntegerField(min_value=0, required=False)
    notes = forms.CharField(widget=forms.Textarea, required=False, strip=False)
