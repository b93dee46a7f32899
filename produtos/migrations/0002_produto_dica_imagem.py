from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("produtos", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="produto",
            name="dica_imagem",
            field=models.CharField(
                blank=True,
                default="",
                help_text="Palavras-chave para busca de imagem.",
                max_length=100,
            ),
        ),
    ]
