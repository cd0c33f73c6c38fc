from django import forms

from .models import Client


class ClientForm(forms.ModelForm):
    """Client half of the master entry page"""

    class Meta:
        model = Client
        fields = ['client_name', 'father_name', 'mobile_number', 'id_proof_type', 'id_proof_number']
        labels = {
            'client_name': 'Client Name',
            'father_name': "Father's Name",
            'mobile_number': 'Mobile Number',
            'id_proof_type': 'ID Proof Type',
            'id_proof_number': 'ID Proof Number',
        }
        widgets = {
            'client_name': forms.TextInput(attrs={'placeholder': "Enter client's full name"}),
            'father_name': forms.TextInput(attrs={'placeholder': "Enter father's name"}),
            'mobile_number': forms.TextInput(attrs={'placeholder': 'Enter 10-digit mobile number'}),
            'id_proof_number': forms.TextInput(attrs={'placeholder': 'Enter ID proof number'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            existing_classes = field.widget.attrs.get('class', '')
            field.widget.attrs['class'] = f'{existing_classes} form-control'.strip()
