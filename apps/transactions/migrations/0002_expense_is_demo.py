from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('transactions', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='expense',
            name='is_demo',
            field=models.BooleanField(default=False, editable=False),
        ),
    ]
