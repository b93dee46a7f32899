# produtos/catalogo_inicial.py

from decimal import Decimal

# Catálogo gravado na primeira abertura, quando a coleção está vazia.
PRODUTOS_INICIAIS = [
    {
        "id": "1",
        "nome": "Doce de Banana Tradicional",
        "descricao": "Doce de banana em barra, receita caseira.",
        "preco": Decimal("12.50"),
        "estoque": 50,
        "categoria": "Doces em barra",
        "imagem_url": "/images/doce-banana-tradicional.png",
        "dica_imagem": "banana sweet",
    },
    {
        "id": "2",
        "nome": "Doce de Banana com Chocolate",
        "descricao": "Doce de banana coberto com chocolate meio amargo.",
        "preco": Decimal("15.00"),
        "estoque": 30,
        "categoria": "Doces em barra",
        "imagem_url": "/images/doce-banana-chocolate.png",
        "dica_imagem": "banana chocolate",
    },
    {
        "id": "3",
        "nome": "Geleia de Banana Artesanal",
        "descricao": "Pote de 250g.",
        "preco": Decimal("18.90"),
        "estoque": 20,
        "categoria": "Geleias",
        "imagem_url": "/images/geleia-banana.png",
        "dica_imagem": "banana jam",
    },
    {
        "id": "4",
        "nome": "Bananinha Cristalizada",
        "descricao": "Pacote com 10 unidades.",
        "preco": Decimal("9.90"),
        "estoque": 40,
        "categoria": "Cristalizados",
        "imagem_url": "/images/bananinha-cristalizada.png",
        "dica_imagem": "candied banana",
    },
]
