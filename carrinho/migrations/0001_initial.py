from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="EspelhoSessao",
            fields=[
                (
                    "chave",
                    models.CharField(max_length=64, primary_key=True, serialize=False),
                ),
                ("valor", models.JSONField(blank=True, null=True)),
                ("atualizado_em", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Espelho de sessão",
                "verbose_name_plural": "Espelhos de sessão",
                "db_table": "espelho_sessao",
            },
        ),
    ]
