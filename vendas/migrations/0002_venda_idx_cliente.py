from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("vendas", "0001_initial"),
    ]

    operations = [
        migrations.AddIndex(
            model_name="venda",
            index=models.Index(fields=["cliente_id"], name="idx_venda_cliente"),
        ),
    ]
