import unittest

from form_serialize import (
    ABSENT,
    FieldDescriptor,
    FormSerializeConfigError,
    SelectOption,
    SerializeOptions,
    Serializer,
    serialize,
)


def _texto(name: str, value: str, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name=name, type="text", value=value, **kwargs)


class ModeSelectionTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.campos = [_texto("a", "1"), _texto("b", "2")]

    def test_sem_opcoes_gera_string(self) -> None:
        self.assertEqual(serialize(self.campos), "a=1&b=2")

    def test_atalho_booleano(self) -> None:
        self.assertEqual(serialize(self.campos, True), {"a": "1", "b": "2"})
        self.assertEqual(serialize(self.campos, False), "a=1&b=2")

    def test_mapeamento_sem_hash_e_estruturado(self) -> None:
        self.assertEqual(serialize(self.campos, {"empty": False}), {"a": "1", "b": "2"})
        self.assertEqual(serialize(self.campos, SerializeOptions()), {"a": "1", "b": "2"})

    def test_hash_falso_explicito(self) -> None:
        self.assertEqual(serialize(self.campos, {"hash": False}), "a=1&b=2")

    def test_formulario_vazio(self) -> None:
        self.assertEqual(serialize(None, True), {})
        self.assertEqual(serialize([]), "")

    def test_opcao_desconhecida_e_ignorada(self) -> None:
        self.assertEqual(serialize(self.campos, {"hash": True, "extra": 1}), {"a": "1", "b": "2"})
        self.assertEqual(serialize(self.campos, {"hash": False, "extra": 1}), "a=1&b=2")

    def test_serializer_invalido(self) -> None:
        with self.assertRaises(FormSerializeConfigError):
            serialize(self.campos, {"serializer": 42})


class CustomSerializerTestCase(unittest.TestCase):
    def test_funcao_recebe_acumulador(self) -> None:
        chamadas = []

        def coletar(result, key, value):
            chamadas.append((key, value))
            result[key.upper()] = value
            return result

        result = serialize([_texto("a", "1"), _texto("b", "2")], {"serializer": coletar})
        self.assertEqual(result, {"A": "1", "B": "2"})
        self.assertEqual(chamadas, [("a", "1"), ("b", "2")])

    def test_estrategia_com_valor_inicial(self) -> None:
        class Pares(Serializer):
            def initial(self):
                return []

            def merge(self, result, key, value):
                result.append((key, value))
                return result

        result = serialize([_texto("a", "1"), _texto("a", "2")], {"serializer": Pares()})
        self.assertEqual(result, [("a", "1"), ("a", "2")])


class PropertiesTestCase(unittest.TestCase):
    def test_controles_de_envio_nao_geram_valores(self) -> None:
        campos = [
            FieldDescriptor(name="go", type="submit", value="Enviar"),
            FieldDescriptor(name="img", type="image", value="x"),
            FieldDescriptor(name="arq", type="file", value="x.txt"),
            FieldDescriptor(name="fs", type="fieldset", value="x", node_name="fieldset"),
            _texto("ok", "1"),
        ]
        self.assertEqual(serialize(campos, {"empty": True}), {"ok": "1"})

    def test_checkbox_indeterminado_com_booleans(self) -> None:
        campos = [FieldDescriptor(name="c", type="checkbox", value="on", checked=True, indeterminate=True)]
        self.assertEqual(serialize(campos, {"booleans": True}), {"c": None})

    def test_grupo_de_radio_vazio_emitido_uma_vez_ao_final(self) -> None:
        campos = [
            FieldDescriptor(name="r", type="radio", value="1"),
            FieldDescriptor(name="r", type="radio", value="2"),
            _texto("a", "x"),
        ]
        self.assertEqual(serialize(campos, {"hash": False, "empty": True}), "a=x&r=")
        self.assertEqual(serialize(campos, {"empty": True}), {"a": "x", "r": ""})

    def test_grupo_de_radio_vazio_sem_empty(self) -> None:
        campos = [FieldDescriptor(name="r", type="radio", value="1")]
        self.assertEqual(serialize(campos, True), {})

    def test_indices_aninhados(self) -> None:
        campos = [_texto("a[b][0]", "x"), _texto("a[b][1]", "y")]
        self.assertEqual(serialize(campos, True), {"a": {"b": ["x", "y"]}})

    def test_promocao_em_colisao(self) -> None:
        campos = [_texto("color", "red"), _texto("color", "blue")]
        self.assertEqual(serialize(campos, True), {"color": ["red", "blue"]})
        campos.append(_texto("color", "green"))
        self.assertEqual(serialize(campos, True), {"color": ["red", "blue", "green"]})

    def test_radio_e_checkbox_com_mesmo_nome(self) -> None:
        campos = [
            FieldDescriptor(name="cor", type="radio", value="azul", checked=True),
            FieldDescriptor(name="cor", type="checkbox", value="verde", checked=True),
        ]
        self.assertEqual(serialize(campos, True), {"cor": ["azul", "verde"]})

    def test_select_multiple_vira_lista(self) -> None:
        campos = [
            FieldDescriptor(
                name="tags",
                type="select-multiple",
                options=[SelectOption("x", True), SelectOption("y", True)],
            )
        ]
        self.assertEqual(serialize(campos, True), {"tags": ["x", "y"]})
        self.assertEqual(serialize(campos, False), "tags=x&tags=y")

    def test_select_multiple_com_uma_opcao_tambem_e_lista(self) -> None:
        campos = [
            FieldDescriptor(name="tags", type="select-multiple", options=[SelectOption("x", True)])
        ]
        self.assertEqual(serialize(campos, True), {"tags": ["x"]})

    def test_indice_com_notacao_numerica_alternativa(self) -> None:
        campos = [_texto("a[0]", "x"), _texto("a[1.0]", "y")]
        self.assertEqual(serialize(campos, True), {"a": ["x", "y"]})
        self.assertEqual(serialize([_texto("a[1e0][0]", "z")], True), {"a": [ABSENT, ["z"]]})
        self.assertEqual(serialize([_texto("a[+1]", "y")], True), {"a": [ABSENT, "y"]})

    def test_number_sem_valor_no_modo_plano_vira_null(self) -> None:
        campos = [FieldDescriptor(name="n", type="number", value=None)]
        self.assertEqual(serialize(campos, {"hash": False, "empty": True}), "n=null")
        self.assertEqual(serialize(campos, {"empty": True}), {"n": None})

    def test_values_em_colisao(self) -> None:
        campos = [_texto("a[x]", "1"), _texto("a[]", "2")]
        self.assertEqual(serialize(campos, True), {"a": {"x": "1", "_values": ["2"]}})

    def test_codificacao_plana(self) -> None:
        campos = [FieldDescriptor(name="full name", type="textarea", value="a b\nc")]
        self.assertEqual(serialize(campos), "full%20name=a+b%0D%0Ac")

    def test_determinismo(self) -> None:
        campos = [
            _texto("a[x]", "1"),
            _texto("a[]", "2"),
            _texto("b", "1"),
            _texto("b", "2"),
            FieldDescriptor(name="n", type="number", value="3.5"),
            FieldDescriptor(name="r", type="radio", value="1"),
        ]
        for options in ({"empty": True}, {"hash": False, "booleans": True}):
            self.assertEqual(serialize(campos, options), serialize(campos, options))

    def test_desabilitados(self) -> None:
        campos = [_texto("a", "1", disabled=True), _texto("b", "2")]
        self.assertEqual(serialize(campos, True), {"b": "2"})
        self.assertEqual(serialize(campos, {"disabled": True}), {"a": "1", "b": "2"})

    def test_number_no_modo_plano(self) -> None:
        campos = [FieldDescriptor(name="qtd", type="number", value="10")]
        self.assertEqual(serialize(campos), "qtd=10")
        self.assertEqual(serialize(campos, True), {"qtd": 10})

    def test_booleans_no_modo_plano(self) -> None:
        campos = [
            FieldDescriptor(name="a", type="checkbox", value="on", checked=True),
            FieldDescriptor(name="b", type="checkbox", value="on"),
        ]
        self.assertEqual(serialize(campos, {"hash": False, "booleans": True}), "a=true&b=false")


if __name__ == "__main__":
    unittest.main()
