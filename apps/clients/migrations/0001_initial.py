from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Client',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('client_name', models.CharField(db_index=True, max_length=100)),
                ('father_name', models.CharField(blank=True, max_length=100)),
                ('mobile_number', models.CharField(db_index=True, max_length=10, validators=[django.core.validators.RegexValidator(message='Enter a 10-digit mobile number', regex='^\\d{10}$')])),
                ('id_proof_type', models.CharField(blank=True, choices=[('aadhar', 'Aadhar Card'), ('pan', 'PAN Card'), ('license', 'Driving License'), ('passport', 'Passport'), ('voter_id', 'Voter ID')], max_length=20)),
                ('id_proof_number', models.CharField(blank=True, max_length=50)),
            ],
            options={
                'db_table': 'clients',
                'ordering': ['-created_at'],
            },
        ),
    ]
