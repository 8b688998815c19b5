import os

FLAG_LABELS = [
    ('enable_sat_scaling', 'Saturation scaling'),
    ('enable_three_point_kr_sat_scaling', '3-pt kr saturation'),
    ('enable_krw_scaling', 'Krw scaling'),
    ('enable_three_point_krw_scaling', '3-pt Krw scaling'),
    ('enable_krn_scaling', 'Krn scaling'),
    ('enable_three_point_krn_scaling', '3-pt Krn scaling'),
    ('enable_pc_scaling', 'Pc scaling'),
    ('enable_leverett_scaling', 'Leverett scaling'),
]


def write_config_report(results, output_dir='results'):
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
    file_eps = os.path.join(output_dir, "EPS_CONFIG.txt")
    print(f"Writing endpoint scaling report to {file_eps}...")
    with open(file_eps, 'w') as f:
        for system, directions in results.items():
            if system == 'material':
                continue
            f.write(f"\n{'='*50}\nSYSTEM {system.upper()}\n{'='*50}\n")
            _write_flag_table(f, directions)
        material = results.get('material')
        if material is not None:
            _write_material(f, material)
    return file_eps


def _write_flag_table(f, directions):
    f.write(f"{'':24s}{'DRAINAGE':^12}{'IMBIBITION':^12}\n")
    f.write("-" * 48 + "\n")
    drainage = directions['drainage']
    imbibition = directions.get('imbibition')
    for attr, label in FLAG_LABELS:
        d_str = _flag_str(getattr(drainage, attr))
        i_str = _flag_str(getattr(imbibition, attr)) if imbibition is not None else "*"
        f.write(f"{label:24s}{d_str:^12}{i_str:^12}\n")
    i_mode = imbibition.pc_scaling_mode if imbibition is not None else "*"
    f.write(f"{'Pc scaling mode':24s}{drainage.pc_scaling_mode:^12}{i_mode:^12}\n")


def _write_material(f, material):
    f.write(f"\n{'='*50}\nBROOKS-COREY\n{'='*50}\n")
    f.write(f"pe          = {material.pe:10.4f}\n")
    f.write(f"alpha       = {material.alpha:10.4f}\n")
    f.write(f"pc_low_sw   = {material.pc_low_sw:10.4f}\n")
    f.write(f"krn_low_sw  = {material.krn_low_sw:10.4f}\n")
    f.write(f"krw_high_sw = {material.krw_high_sw:10.4f}\n")


def _flag_str(value):
    return "ON" if value else "off"
