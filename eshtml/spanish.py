"""
# EsHTML: spanish.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The Spanish vocabulary.

Mapping strategy:
- Full Spanish words for common semantic elements and attributes (`botón` → `button`, `clase` → `class`).
- Spanish abbreviations for some common elements and attributes (`e1` → `h1`, `ft` → `tr`, `fte` → `src`).
- Short or technical names are kept in English (`div`, `span`, `p`, `svg`, `id`, `data-*`).
"""

from eshtml.constants import HTML_VOID_ELEMENT_NAMES
from eshtml.vocabulary import Vocabulary


SPANISH_TAG_PAIRS = [
    # Document structure
    ('eshtml', 'html'),
    ('cabecera', 'head'),
    ('cuerpo', 'body'),
    ('título', 'title'),

    # Semantic structure
    ('encabezado', 'header'),
    ('pie', 'footer'),
    ('principal', 'main'),
    ('aparte', 'aside'),
    ('artículo', 'article'),
    ('sección', 'section'),

    # Forms
    ('formulario', 'form'),
    ('botón', 'button'),
    ('entrada', 'input'),
    ('áreatexto', 'textarea'),
    ('etiqueta', 'label'),
    ('seleccionar', 'select'),
    ('opción', 'option'),
    ('grupoopc', 'optgroup'),
    ('leyenda', 'legend'),

    # Tables
    ('tabla', 'table'),
    ('subtítulo', 'caption'),
    ('columna', 'col'),
    ('grupocolumnas', 'colgroup'),

    # Media and embedded content
    ('lienzo', 'canvas'),
    ('imagen', 'picture'),
    ('fuente', 'source'),
    ('empotrar', 'embed'),
    ('marcol', 'iframe'),
    ('objeto', 'object'),
    ('parámetro', 'param'),
    ('área', 'area'),

    # Text semantics
    ('én', 'em'),
    ('fuerte', 'strong'),
    ('pequeño', 'small'),
    ('marca', 'mark'),
    ('código', 'code'),
    ('cita', 'cite'),
    ('abrv', 'abbr'),
    ('tiempo', 'time'),

    # Grouping and metadata
    ('figura', 'figure'),
    ('piefigura', 'figcaption'),
    ('datos', 'data'),
    ('dirección', 'address'),
    ('mapa', 'map'),
    ('menú', 'menu'),
    ('grupoe', 'hgroup'),

    # Disclosure
    ('detalles', 'details'),
    ('resumen', 'summary'),
    ('diálogo', 'dialog'),

    # Measurement
    ('medidor', 'meter'),
    ('progreso', 'progress'),
    ('salida', 'output'),

    # Scripting and styling
    ('guion', 'script'),
    ('estilo', 'style'),
    ('enlace', 'link'),
    ('plantilla', 'template'),
    ('ranura', 'slot'),

    # Ruby annotations (table rows are `ft`)
    ('rubí', 'ruby'),
    ('tr', 'rt'),
    ('pr', 'rp'),

    # Specialised
    ('buscar', 'search'),
    ('c', 'q'),
    ('citabloque', 'blockquote'),
    ('listadatos', 'datalist'),
    ('grupocampos', 'fieldset'),

    # Headings (e for encabezado)
    ('e1', 'h1'),
    ('e2', 'h2'),
    ('e3', 'h3'),
    ('e4', 'h4'),
    ('e5', 'h5'),
    ('e6', 'h6'),

    # Lists
    ('lo', 'ol'),
    ('ld', 'ul'),
    ('el', 'li'),

    # Table structure
    ('ft', 'tr'),
    ('ct', 'td'),
    ('et', 'th'),
    ('encabezadot', 'thead'),
    ('cuerpot', 'tbody'),
    ('piet', 'tfoot'),
]

SPANISH_UNCHANGED_TAG_NAMES = [
    'a',
    'abbr',
    'area',
    'audio',
    'b',
    'base',
    'bdi',
    'bdo',
    'blockquote',
    'br',
    'button',
    'canvas',
    'data',
    'datalist',
    'dd',
    'del',
    'dfn',
    'div',
    'dl',
    'dt',
    'embed',
    'fieldset',
    'form',
    'h1',
    'h2',
    'h3',
    'h4',
    'h5',
    'h6',
    'hr',
    'html',
    'i',
    'iframe',
    'img',
    'ins',
    'kbd',
    'label',
    'math',
    'menu',
    'meta',
    'nav',
    'noscript',
    'p',
    'picture',
    'pre',
    'q',
    's',
    'samp',
    'script',
    'small',
    'source',
    'span',
    'style',
    'sub',
    'sup',
    'svg',
    'table',
    'tbody',
    'tfoot',
    'thead',
    'track',
    'u',
    'var',
    'video',
    'wbr',
]

SPANISH_ATTRIBUTE_PAIRS = [
    # Global
    ('clase', 'class'),
    ('título', 'title'),
    ('estilo', 'style'),
    ('idioma', 'lang'),
    ('función', 'role'),
    ('oculto', 'hidden'),

    # Form input
    ('nombre', 'name'),
    ('valor', 'value'),
    ('tipo', 'type'),
    ('lugar', 'placeholder'),
    ('requerido', 'required'),
    ('deshabilitado', 'disabled'),
    ('marcado', 'checked'),
    ('seleccionado', 'selected'),
    ('autofoco', 'autofocus'),
    ('múltiple', 'multiple'),

    # Form validation
    ('patrón', 'pattern'),
    ('longitudmáxima', 'maxlength'),
    ('máximo', 'max'),
    ('mínimo', 'min'),
    ('paso', 'step'),
    ('novalidar', 'novalidate'),

    # Form submission
    ('método', 'method'),
    ('acción', 'action'),
    ('destino', 'target'),
    ('objetivo', 'target'),
    ('acepta', 'accept'),
    ('acepta-charset', 'accept-charset'),

    # Links
    ('enlace', 'href'),
    ('relación', 'rel'),

    # Dimensions
    ('ancho', 'width'),
    ('anchura', 'width'),
    ('alto', 'height'),
    ('altura', 'height'),
    ('tamaño', 'size'),
    ('filas', 'rows'),
    ('columnas', 'cols'),

    # Tables
    ('encabezados', 'headers'),
    ('escopo', 'scope'),
    ('ec', 'colspan'),
    ('ef', 'rowspan'),

    # Media
    ('autoreproducir', 'autoplay'),
    ('medios', 'media'),
    ('tiposrc', 'srcset'),

    # Meters
    ('baja', 'low'),
    ('optimo', 'optimum'),

    # Text
    ('traduce', 'translate'),
    ('envoltura', 'wrap'),
    ('saltolinea', 'wrap'),

    # Form association
    ('para', 'for'),
    ('lista', 'list'),

    # Miscellaneous
    ('teclaacceso', 'accesskey'),
    ('usemapa', 'usemap'),
    ('tipocontenido', 'content'),
    ('cruzado', 'crossorigin'),
    ('integridad', 'integrity'),
    ('asyncrono', 'async'),

    # Abbreviations
    ('fte', 'src'),
    ('rd', 'rel'),
    ('ta', 'alt'),
    ('idio', 'lang'),
]

SPANISH_UNCHANGED_ATTRIBUTE_NAMES = [
    'accept',
    'action',
    'async',
    'charset',
    'class',
    'content',
    'coords',
    'crossorigin',
    'datetime',
    'defer',
    'dir',
    'enctype',
    'href',
    'id',
    'integrity',
    'method',
    'muted',
    'src',
    'srcdoc',
    'srclang',
    'xmlns',
]

SPANISH_UNCHANGED_ATTRIBUTE_PREFIXES = [
    'aria-',
    'data-',
]

SPANISH_ATTRIBUTE_VALUE_PAIRS = [
    # Input types
    ('texto', 'text'),
    ('archivo', 'file'),
    ('enviar', 'submit'),

    # Booleans
    ('verdadero', 'true'),
    ('falso', 'false'),
    ('sí', 'yes'),
    ('no', 'no'),

    # Alignment
    ('izquierda', 'left'),
    ('derecha', 'right'),
    ('centro', 'center'),
    ('justificado', 'justify'),
]

SPANISH_VOCABULARY = Vocabulary.build(
    tag_pairs=SPANISH_TAG_PAIRS,
    attribute_pairs=SPANISH_ATTRIBUTE_PAIRS,
    attribute_value_pairs=SPANISH_ATTRIBUTE_VALUE_PAIRS,
    unchanged_tag_names=SPANISH_UNCHANGED_TAG_NAMES,
    unchanged_attribute_names=SPANISH_UNCHANGED_ATTRIBUTE_NAMES,
    unchanged_attribute_prefixes=SPANISH_UNCHANGED_ATTRIBUTE_PREFIXES,
    void_element_names=HTML_VOID_ELEMENT_NAMES,
)
