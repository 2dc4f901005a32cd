from django import forms

from ..location import location_to_json, parse_location
from ..models import HousingListing, JobListing

LOCATION_HELP = 'An address, or coordinates as "lat, lng".'


class ListingLocationMixin:
    """Edits the stored JSON location as a single text input."""

    def _init_location(self):
        field = forms.CharField(
            required=False,
            help_text=LOCATION_HELP,
            widget=forms.TextInput(attrs={"class": "form-control"}),
        )
        self.fields["location_text"] = field
        if self.instance and self.instance.pk:
            location = parse_location(self.instance.location)
            field.initial = location.as_text() if location is not None else ""

    def clean_location_text(self):
        return parse_location(self.cleaned_data.get("location_text"))

    def listing_fields(self) -> dict:
        fields = {name: self.cleaned_data[name] for name in self._meta.fields}
        fields["location"] = location_to_json(self.cleaned_data.get("location_text"))
        return fields


class HousingListingForm(ListingLocationMixin, forms.ModelForm):
    class Meta:
        model = HousingListing
        fields = [
            "title",
            "description",
            "price",
            "available_from",
            "available_until",
            "contact_email",
            "contact_phone",
        ]
        widgets = {
            "title": forms.TextInput(attrs={"class": "form-control"}),
            "description": forms.Textarea(attrs={"class": "form-control", "rows": 4}),
            "price": forms.NumberInput(attrs={"class": "form-control", "min": 0, "step": "0.01"}),
            "available_from": forms.DateInput(attrs={"type": "date", "class": "form-control"}),
            "available_until": forms.DateInput(attrs={"type": "date", "class": "form-control"}),
            "contact_email": forms.EmailInput(attrs={"class": "form-control"}),
            "contact_phone": forms.TextInput(attrs={"class": "form-control"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._init_location()

    def clean(self):
        cleaned_data = super().clean()
        available_from = cleaned_data.get("available_from")
        available_until = cleaned_data.get("available_until")
        if available_from and available_until and available_until < available_from:
            self.add_error("available_until", "Available until cannot be before available from.")
        return cleaned_data


class JobListingForm(ListingLocationMixin, forms.ModelForm):
    class Meta:
        model = JobListing
        fields = [
            "title",
            "company",
            "description",
            "job_type",
            "salary",
            "contact_email",
            "contact_phone",
        ]
        widgets = {
            "title": forms.TextInput(attrs={"class": "form-control"}),
            "company": forms.TextInput(attrs={"class": "form-control"}),
            "description": forms.Textarea(attrs={"class": "form-control", "rows": 4}),
            "job_type": forms.Select(attrs={"class": "form-select"}),
            "salary": forms.TextInput(attrs={"class": "form-control", "placeholder": "e.g., $50,000 - $70,000 per year"}),
            "contact_email": forms.EmailInput(attrs={"class": "form-control"}),
            "contact_phone": forms.TextInput(attrs={"class": "form-control"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._init_location()
