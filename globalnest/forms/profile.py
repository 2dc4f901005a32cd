from django import forms
from django.conf import settings
from PIL import Image, UnidentifiedImageError

from ..models import Profile


class ProfileForm(forms.ModelForm):
    latitude = forms.FloatField(required=False, widget=forms.HiddenInput)
    longitude = forms.FloatField(required=False, widget=forms.HiddenInput)
    use_current_location = forms.BooleanField(
        required=False,
        label="Update my location from this browser",
        widget=forms.CheckboxInput(attrs={"class": "form-check-input"}),
    )

    class Meta:
        model = Profile
        fields = ["name", "university", "field_of_study", "bio"]
        widgets = {
            "name": forms.TextInput(attrs={"class": "form-control"}),
            "university": forms.TextInput(attrs={"class": "form-control"}),
            "field_of_study": forms.TextInput(attrs={"class": "form-control"}),
            "bio": forms.Textarea(attrs={"class": "form-control", "rows": 4}),
        }

    def reported_coordinates(self) -> tuple[float | None, float | None]:
        return self.cleaned_data.get("latitude"), self.cleaned_data.get("longitude")


class ProfileImageForm(forms.Form):
    image = forms.FileField(widget=forms.ClearableFileInput(attrs={"class": "form-control", "accept": "image/*"}))

    def clean_image(self):
        upload = self.cleaned_data["image"]
        max_bytes = getattr(settings, "PROFILE_IMAGE_MAX_BYTES", 5 * 1024 * 1024)
        if upload.size > max_bytes:
            raise forms.ValidationError(f"Image must be smaller than {max_bytes // (1024 * 1024)}MB.")
        content_type = getattr(upload, "content_type", "") or ""
        if content_type and not content_type.startswith("image/"):
            raise forms.ValidationError("Please upload an image file.")
        try:
            with Image.open(upload) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise forms.ValidationError("Please upload an image file.")
        upload.seek(0)
        return upload
