import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('technologies', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('surname', models.CharField(max_length=100)),
                ('technology', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='students', to='technologies.technology')),
            ],
            options={
                'db_table': 'students_student',
                'ordering': ['name'],
            },
        ),
    ]
