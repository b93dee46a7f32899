# commons/views/repositorio_views.py

import logging

from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class RepositorioViewSet(viewsets.GenericViewSet):
    """
    CRUD sobre um repositório do armazenamento (não sobre um queryset).

    Subclasses definem `repositorio_class` e `serializer_class`.
    Erros do armazenamento (404/409) são traduzidos pelo exception handler.
    """

    repositorio_class = None
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = "[^/]+"

    def get_repositorio(self):
        return self.repositorio_class()

    def list(self, request, *args, **kwargs):
        itens = self.get_repositorio().listar()
        return Response(self.get_serializer(itens, many=True).data)

    def retrieve(self, request, pk=None, *args, **kwargs):
        item = self.get_repositorio().obter_por_id(pk)
        return Response(self.get_serializer(item).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        instancia = self.get_repositorio().adicionar(dict(serializer.validated_data))
        logger.info(
            "HTTP: registro criado. recurso=%s, id=%s",
            self.basename,
            instancia.pk,
        )
        return Response(
            self.get_serializer(instancia).data, status=status.HTTP_201_CREATED
        )

    def update(self, request, pk=None, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        repositorio = self.get_repositorio()
        atual = repositorio.obter_por_id(pk)

        serializer = self.get_serializer(atual, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        for campo, valor in serializer.validated_data.items():
            setattr(atual, campo, valor)
        # a chave vem da URL
        atual.pk = pk

        instancia = repositorio.atualizar(atual)
        logger.info(
            "HTTP: registro atualizado. recurso=%s, id=%s", self.basename, pk
        )
        return Response(self.get_serializer(instancia).data)

    def partial_update(self, request, pk=None, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, pk, *args, **kwargs)

    def destroy(self, request, pk=None, *args, **kwargs):
        self.get_repositorio().remover(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
