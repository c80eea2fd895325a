"""
# EsHTML: test_rewriter.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `rewriter.py`.
"""

import unittest

from eshtml.rewriter import Rewriter
from eshtml.spanish import SPANISH_VOCABULARY


class TestRewriter(unittest.TestCase):
    def setUp(self):
        self.forward_rewriter = Rewriter(SPANISH_VOCABULARY)
        self.reverse_rewriter = Rewriter(SPANISH_VOCABULARY, reverse_enabled=True)

    def test_pass_ids(self):
        self.assertEqual(
            self.forward_rewriter.pass_ids,
            [
                'placeholder-markers',
                'verbatim-protect',
                'tag-names',
                'attribute-names',
                'attribute-values',
                'placeholder-unprotect',
            ],
        )
        self.assertEqual(
            self.reverse_rewriter.pass_ids,
            [
                'placeholder-markers',
                'verbatim-protect',
                'tag-names',
                'attribute-names',
                'placeholder-unprotect',
            ],
        )
        self.assertFalse(self.forward_rewriter.reverse_enabled)
        self.assertTrue(self.reverse_rewriter.reverse_enabled)

    def test_tags(self):
        for source, expected_output in [
            ('', ''),
            ('<título>Test</título>', '<title>Test</title>'),
            ('<sección>Test</sección>', '<section>Test</section>'),
            ('<e1>Título Principal</e1>', '<h1>Título Principal</h1>'),
            ('<citabloque><p>Una cita.</p></citabloque>', '<blockquote><p>Una cita.</p></blockquote>'),
            ('<div><etiqueta>Nueva</etiqueta><p>Texto</p></div>', '<div><label>Nueva</label><p>Texto</p></div>'),
            ("<a href='https://example.com'>Ejemplo</a>", "<a href='https://example.com'>Ejemplo</a>"),
            ('<desconocido>Test</desconocido>', '<desconocido>Test</desconocido>'),
            ('<BOTÓN CLASE="x">a</Botón>', '<button class="x">a</button>'),
            ('<p>5 &gt; 3 &amp;&amp; 2 &lt; 4</p>', '<p>5 &gt; 3 &amp;&amp; 2 &lt; 4</p>'),
        ]:
            self.assertEqual(self.forward_rewriter.rewrite(source), expected_output)

    def test_tables(self):
        self.assertEqual(
            self.forward_rewriter.rewrite(
                '<tabla><ft><et ec="2">Cabeza</et></ft><ft><ct ef="2">Dato</ct></ft></tabla>'
            ),
            '<table><tr><th colspan="2">Cabeza</th></tr><tr><td rowspan="2">Dato</td></tr></table>',
        )
        self.assertEqual(
            self.forward_rewriter.rewrite('<rubí>漢<pr>(</pr><tr>kan</tr><pr>)</pr></rubí>'),
            '<ruby>漢<rp>(</rp><rt>kan</rt><rp>)</rp></ruby>',
        )

    def test_forms(self):
        self.assertEqual(
            self.forward_rewriter.rewrite(
                '<formulario acción="/enviar" método="post">'
                '<entrada tipo="texto" nombre="usuario" requerido>'
                '<botón tipo="enviar">Enviar</botón>'
                '</formulario>'
            ),
            '<form action="/enviar" method="post">'
            '<input type="text" name="usuario" required>'
            '<button type="submit">Enviar</button>'
            '</form>',
        )

    def test_attributes(self):
        for source, expected_output in [
            ('<img fte="test.jpg" ta="desc">', '<img src="test.jpg" alt="desc">'),
            ('<img ta="a" tamaño="10">', '<img alt="a" size="10">'),
            ('<eshtml idio="es"></eshtml>', '<html lang="es"></html>'),
            ('<botón deshabilitado></botón>', '<button disabled></button>'),
            ('<seleccionar múltiple></seleccionar>', '<select multiple></select>'),
            ('<div desconocido="valor"></div>', '<div desconocido="valor"></div>'),
            ('<p>La clase de hoy</p>', '<p>La clase de hoy</p>'),
        ]:
            self.assertEqual(self.forward_rewriter.rewrite(source), expected_output)

    def test_attribute_values(self):
        for source, expected_output in [
            ('<entrada tipo="archivo">', '<input type="file">'),
            ('<div data-activo="falso"></div>', '<div data-activo="false"></div>'),
            ('<div data-mostrar="sí"></div>', '<div data-mostrar="yes"></div>'),
            ('<div align="centro"></div>', '<div align="center"></div>'),
            ('<entrada tipo="  texto  ">', '<input type="text">'),
            ("<entrada tipo='texto'>", "<input type='text'>"),
            ('<entrada valor="Escribe texto aquí">', '<input value="Escribe texto aquí">'),
        ]:
            self.assertEqual(self.forward_rewriter.rewrite(source), expected_output)

    def test_verbatim_regions_preserved(self):
        for source in [
            '<!-- comentario -->',
            '<!-- <botón clase="x"> -->',
            '<![CDATA[<botón>datos</botón>]]>',
            '<?xml version="1.0" encoding="UTF-8"?>',
            '',
            '<!--  -->',
        ]:
            self.assertEqual(self.forward_rewriter.rewrite(source), source)

        self.assertEqual(
            self.forward_rewriter.rewrite('<!-- <botón> --><botón>x</botón>'),
            '<!-- <botón> --><button>x</button>',
        )

    def test_verbatim_openers_inside_attribute_values(self):
        self.assertEqual(
            self.forward_rewriter.rewrite('<entrada lugar="escribe <!-- aquí"><botón>x</botón><!-- nota -->'),
            '<input placeholder="escribe <!-- aquí"><button>x</button><!-- nota -->',
        )
        self.assertEqual(
            self.forward_rewriter.rewrite('<botón título="<?">Hola</botón><botón título="?>">x</botón>'),
            '<button title="<?">Hola</button><button title="?>">x</button>',
        )

    def test_stray_quotes(self):
        self.assertEqual(
            self.forward_rewriter.rewrite("<p clase=l'eau>x</p><botón tipo='enviar'>y</botón>"),
            "<p class=l'eau>x</p><button type='submit'>y</button>",
        )

    def test_reverse(self):
        self.assertEqual(
            self.reverse_rewriter.rewrite('<table><tr><td>x</td></tr></table>'),
            '<tabla><ft><ct>x</ct></ft></tabla>',
        )
        self.assertEqual(
            self.reverse_rewriter.rewrite('<input type="text" class="a" width="3">'),
            '<entrada tipo="text" clase="a" ancho="3">',
        )
        self.assertEqual(
            self.reverse_rewriter.rewrite('<!-- <button> --><div></div>'),
            '<!-- <button> --><div></div>',
        )

    def test_round_trip(self):
        source = '<eshtml><cuerpo><e1 clase="titulo">Hola</e1><ld><el>uno</el></ld></cuerpo></eshtml>'
        output = self.forward_rewriter.rewrite(source)

        self.assertEqual(
            output,
            '<html><body><h1 class="titulo">Hola</h1><ul><li>uno</li></ul></body></html>',
        )
        self.assertEqual(self.reverse_rewriter.rewrite(output), source)

    def test_idempotence(self):
        output = self.forward_rewriter.rewrite('<botón clase="x">Hola</botón>')
        self.assertEqual(self.forward_rewriter.rewrite(output), output)


if __name__ == '__main__':
    unittest.main()
