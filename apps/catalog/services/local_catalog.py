"""
Bundled excerpt of the public material (CATMAT) and service (CATSERV)
catalogs, searched when the remote registry cannot be reached.
"""

CATALOG_MATERIAL = 'CATMAT'
CATALOG_SERVICE = 'CATSERV'

OFFICIAL_CATALOGS = [
    {'id': 1, 'name': CATALOG_MATERIAL, 'description': 'Catálogo de Materiais'},
    {'id': 2, 'name': CATALOG_SERVICE, 'description': 'Catálogo de Serviços'},
]


def _entry(code, description, unit, category, subcategory, catalog):
    return {
        'code': code,
        'description': description,
        'unit': unit,
        'category': category,
        'subcategory': subcategory,
        'catalog': catalog,
    }


MATERIALS = [
    _entry(code, description, unit, category, subcategory, CATALOG_MATERIAL)
    for code, description, unit, category, subcategory in [
        ('367900', 'PAPEL, TIPO A4, BRANCO, FORMATO 210 X 297 MM, 75 G/M2', 'RM', 'Material de Escritório', 'Papel para Impressão'),
        ('251550', 'CANETA ESFEROGRÁFICA, TINTA AZUL, CORPO PLÁSTICO TRANSPARENTE', 'UN', 'Material de Escritório', 'Canetas e Marcadores'),
        ('251551', 'CANETA ESFEROGRÁFICA, TINTA PRETA, CORPO PLÁSTICO', 'UN', 'Material de Escritório', 'Canetas e Marcadores'),
        ('251552', 'CANETA ESFEROGRÁFICA, TINTA VERMELHA, CORPO PLÁSTICO', 'UN', 'Material de Escritório', 'Canetas e Marcadores'),
        ('251560', 'CANETA MARCA TEXTO, CORES VARIADAS, PONTA CHANFRADA', 'UN', 'Material de Escritório', 'Canetas e Marcadores'),
        ('300400', 'LÁPIS GRAFITE N° 2, MADEIRA, SEXTAVADO, COM BORRACHA', 'UN', 'Material de Escritório', 'Lápis e Lapiseiras'),
        ('350200', 'GRAMPEADOR DE MESA, CAPACIDADE 20 FOLHAS, METAL/PLÁSTICO', 'UN', 'Material de Escritório', 'Grampeadores e Perfuradores'),
        ('350201', 'GRAMPO 26/6, GALVANIZADO, CAIXA COM 5000 UNIDADES', 'CX', 'Material de Escritório', 'Grampos e Clipes'),
        ('301100', 'ENVELOPE BRANCO, TAMANHO OFÍCIO, 114 X 229 MM, LISO', 'CX', 'Material de Escritório', 'Envelopes'),
        ('450000', 'PASTA AZ, LOMBADA LARGA, COM MECANISMO ALAVANCA, TAMANHO OFÍCIO', 'UN', 'Material de Escritório', 'Pastas e Encadernadores'),
        ('450001', 'PASTA SUSPENSA, EM PAPEL KRAFT, COM VISOR, TAMANHO OFÍCIO', 'UN', 'Material de Escritório', 'Pastas e Encadernadores'),
        ('600000', 'IMPRESSORA LASER MONOCROMÁTICA, VELOCIDADE 30 PPM, USB', 'UN', 'Equipamentos de TI', 'Impressoras'),
        ('600001', 'COMPUTADOR DESKTOP, PROCESSADOR I5, 8GB RAM, SSD 256GB', 'UN', 'Equipamentos de TI', 'Microcomputadores'),
        ('600002', 'MOUSE ÓPTICO USB, 1200 DPI, SCROLL, CABO 1,5M', 'UN', 'Equipamentos de TI', 'Periféricos'),
        ('600003', 'TECLADO USB ABNT2, PADRÃO BRASILEIRO, PLUG AND PLAY', 'UN', 'Equipamentos de TI', 'Periféricos'),
        ('600010', 'MONITOR LCD 21,5", FULL HD 1920X1080, VGA/HDMI', 'UN', 'Equipamentos de TI', 'Monitores'),
        ('600020', 'NOBREAK 1200VA, BIVOLT AUTOMÁTICO, 8 TOMADAS', 'UN', 'Equipamentos de TI', 'Estabilizadores e Nobreaks'),
        ('700100', 'CADEIRA SECRETÁRIA GIRATÓRIA, ESTOFADA EM TECIDO, COM RODÍZIOS', 'UN', 'Mobiliário', 'Cadeiras'),
        ('700101', 'MESA DE ESCRITÓRIO EM L, TAMPO MDF 25MM, COM PORTA-TECLADO', 'UN', 'Mobiliário', 'Mesas'),
        ('700102', 'ARMÁRIO DE AÇO, 2 PORTAS, 4 PRATELEIRAS, 1,98X0,92X0,40M', 'UN', 'Mobiliário', 'Armários e Arquivos'),
        ('800100', 'ÁGUA MINERAL, NATURAL, SEM GÁS, GARRAFA PET 500ML', 'UN', 'Alimentos e Bebidas', 'Águas e Refrigerantes'),
        ('800200', 'CAFÉ EM PÓ TORRADO E MOÍDO, TRADICIONAL, EMBALAGEM 500G, VÁCUO', 'KG', 'Alimentos e Bebidas', 'Café, Chá e Afins'),
        ('900100', 'CIMENTO PORTLAND CP II-E-32, SACO 50KG', 'SC', 'Material de Construção', 'Cimento e Cal'),
        ('900200', 'TINTA LÁTEX ACRÍLICA, BRANCA, LATA 18L, RENDIMENTO 300M2', 'LT', 'Material de Construção', 'Tintas e Vernizes'),
        ('100100', 'MEDICAMENTO: PARACETAMOL 500MG, COMPRIMIDO, EMBALAGEM 20 UNIDADES', 'CX', 'Medicamentos', 'Analgésicos e Antitérmicos'),
    ]
]

SERVICES = [
    _entry(code, description, unit, category, subcategory, CATALOG_SERVICE)
    for code, description, unit, category, subcategory in [
        ('S001', 'SERVIÇOS DE LIMPEZA E CONSERVAÇÃO DE AMBIENTES INTERNOS', 'M2', 'Serviços Gerais', 'Limpeza'),
        ('S002', 'SERVIÇOS DE VIGILÂNCIA PATRIMONIAL ARMADA 24 HORAS', 'PST', 'Serviços de Segurança', 'Vigilância'),
        ('S003', 'SERVIÇOS DE MANUTENÇÃO PREVENTIVA E CORRETIVA DE AR-CONDICIONADO', 'SV', 'Manutenção', 'Ar-Condicionado'),
        ('S004', 'SERVIÇOS TÉCNICOS EM TECNOLOGIA DA INFORMAÇÃO - SUPORTE HELPDESK', 'H', 'Tecnologia da Informação', 'Suporte Técnico'),
        ('S005', 'SERVIÇOS DE MANUTENÇÃO ELÉTRICA PREDIAL', 'SV', 'Manutenção', 'Elétrica'),
        ('S006', 'SERVIÇOS DE RECEPÇÃO E ATENDIMENTO AO PÚBLICO', 'PST', 'Serviços Administrativos', 'Recepção'),
        ('S007', 'SERVIÇOS DE TRANSPORTE DE PESSOAS - MOTORISTA', 'H', 'Transporte', 'Transporte de Pessoal'),
        ('S008', 'SERVIÇOS DE REPROGRAFIA E IMPRESSÃO DE DOCUMENTOS', 'PG', 'Serviços Administrativos', 'Reprografia'),
        ('S009', 'SERVIÇOS DE JARDINAGEM E MANUTENÇÃO DE ÁREAS VERDES', 'M2', 'Serviços Gerais', 'Jardinagem'),
        ('S010', 'SERVIÇOS DE COPEIRAGEM E COZINHA', 'PST', 'Serviços Gerais', 'Copeiragem'),
        ('S011', 'SERVIÇOS DE DESENVOLVIMENTO DE SOFTWARE SOB DEMANDA', 'H', 'Tecnologia da Informação', 'Desenvolvimento de Software'),
        ('S012', 'SERVIÇOS DE CAPACITAÇÃO E TREINAMENTO DE PESSOAL', 'H', 'Educação e Treinamento', 'Treinamento'),
        ('S013', 'SERVIÇOS DE LOCAÇÃO DE VEÍCULO EXECUTIVO COM MOTORISTA', 'DI', 'Transporte', 'Locação de Veículos'),
        ('S014', 'SERVIÇOS DE FORNECIMENTO DE REFEIÇÕES - SELF-SERVICE POR KG', 'KG', 'Alimentação', 'Refeições'),
        ('S015', 'SERVIÇOS DE CONSULTORIA EM GESTÃO E PLANEJAMENTO ESTRATÉGICO', 'H', 'Consultoria', 'Gestão'),
        ('S016', 'SERVIÇOS DE MANUTENÇÃO HIDRÁULICA PREDIAL', 'SV', 'Manutenção', 'Hidráulica'),
        ('S017', 'SERVIÇOS DE DESINFECÇÃO, DESINSETIZAÇÃO E DESRATIZAÇÃO', 'M2', 'Serviços Gerais', 'Controle de Pragas'),
        ('S018', 'SERVIÇOS DE TELECOMUNICAÇÕES - LINK DE INTERNET DEDICADO', 'MES', 'Tecnologia da Informação', 'Conectividade'),
        ('S019', 'SERVIÇOS GRÁFICOS - IMPRESSÃO DE MATERIAL INSTITUCIONAL', 'UN', 'Serviços Gráficos', 'Material Impresso'),
        ('S020', 'SERVIÇOS DE AUDITORIA CONTÁBIL E FINANCEIRA', 'SV', 'Serviços Profissionais', 'Auditoria'),
    ]
]
